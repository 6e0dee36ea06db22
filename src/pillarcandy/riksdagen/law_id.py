from __future__ import annotations

import re
from dataclasses import dataclass

from pillarcandy.riksdagen.errors import LawIDFormatError, NotAnIntegerError

DEFAULT_BASE_URL = "http://data.riksdagen.se/dokument"

_LAW_ID_RE = re.compile(r"[0-9]{4}:[0-9]{1,4}")
_INT_RE = re.compile(r"[0-9]+")


def law_id_valid(text: str) -> bool:
    return bool(_LAW_ID_RE.fullmatch(text))


@dataclass(frozen=True)
class LawID:
    """
    Law identifier or "beteckning" of an SFS statute, e.g. 1998:899.

    Build it with LawID.parse() for user input. Both parts must fit in 0..9999.
    """

    year: int
    number: int

    def __post_init__(self) -> None:
        for value in (self.year, self.number):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 9999:
                raise LawIDFormatError()

    @classmethod
    def parse(cls, text: str) -> "LawID":
        s = (text or "").strip()

        if s.count(":") != 1:
            raise LawIDFormatError()

        year_s, number_s = s.split(":")
        # A side that is present but not digits gets its own error
        for part in (year_s, number_s):
            if part and not _INT_RE.fullmatch(part):
                raise NotAnIntegerError(part)

        if not law_id_valid(s):
            raise LawIDFormatError()

        return cls(year=int(year_s), number=int(number_s))

    def __str__(self) -> str:
        return f"{self.year:04d}:{self.number}"

    @property
    def document_id(self) -> str:
        # sfs-1998-899
        return f"sfs-{self.year:04d}-{self.number}"

    def to_url(self, base_url: str = DEFAULT_BASE_URL) -> str:
        return f"{base_url.rstrip('/')}/{self.document_id}"
