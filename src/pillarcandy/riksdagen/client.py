from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from pillarcandy.riksdagen.errors import RequestError
from pillarcandy.riksdagen.law_id import DEFAULT_BASE_URL, LawID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiksdagenConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_s: int = 30
    user_agent: str = "pillarcandy/0.1 (sfs lookup)"


class RiksdagenClient:
    """
    Blocking client for the Riksdagen document API.

    One GET per call, no retries, no caching.
    """

    def __init__(self, cfg: RiksdagenConfig | None = None) -> None:
        self.cfg = cfg or RiksdagenConfig()

    def document_url(self, law_id: LawID) -> str:
        return law_id.to_url(self.cfg.base_url)

    def fetch_document_xml(self, law_id: LawID) -> str:
        url = self.document_url(law_id)
        headers = {
            "User-Agent": self.cfg.user_agent,
            "Accept": "application/xml",
        }

        logger.debug("GET %s", url)
        try:
            r = requests.get(url, headers=headers, timeout=self.cfg.timeout_s)
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise RequestError(url, reason=str(e)) from e

        if not 200 <= r.status_code < 300:
            logger.warning("HTTP %s for %s", r.status_code, url)
            raise RequestError(url, status_code=r.status_code, reason=r.reason or "")

        # The API does not always declare a charset; bodies are UTF-8 XML.
        r.encoding = "utf-8"
        return r.text
