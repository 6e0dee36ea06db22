from __future__ import annotations

from typing import Optional


class LawError(Exception):
    """Base class for every failure in the law lookup pipeline."""

    default_message = "Law lookup failed."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class LawIDFormatError(LawError):
    default_message = "Valid LawID format is <year>:<number>."


class NotAnIntegerError(LawIDFormatError):
    def __init__(self, part: str) -> None:
        self.part = part
        super().__init__(f"Not an integer: {part!r}. Valid LawID format is <year>:<number>.")


class RequestError(LawError):
    """Transport failure or non-2xx answer from the document API."""

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = "") -> None:
        self.url = url
        self.status_code = status_code
        if status_code is not None:
            msg = f"HTTP {status_code} for {url}"
        else:
            msg = f"Request to {url} failed"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class DataFormatError(LawError):
    default_message = "Law does not contain valid information."


class DocumentParseError(DataFormatError):
    default_message = "Document body could not be parsed as XML."
