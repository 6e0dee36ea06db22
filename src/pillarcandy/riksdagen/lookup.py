from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Literal, Optional, Union

from pillarcandy.riksdagen import get_client
from pillarcandy.riksdagen.client import RiksdagenClient
from pillarcandy.riksdagen.document import LawMetadata, LawText, parse_law_metadata, parse_law_text
from pillarcandy.riksdagen.errors import LawError
from pillarcandy.riksdagen.law_id import LawID

logger = logging.getLogger(__name__)

Mode = Literal["metadata", "text"]

_METADATA_LABELS = {
    "year": "Riksmöte",
    "number": "Nummer",
    "title": "Titel",
    "sub_title": "Undertitel",
    "doc_type": "Typ",
    "sub_type": "Undertyp",
    "department": "Organ",
    "date": "Datum",
    "published": "Publicerad",
}


@dataclass(frozen=True)
class ValidLaw:
    law_id: LawID
    document: Union[LawMetadata, LawText]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class InvalidLaw:
    law_id: Optional[LawID]
    error: str

    @property
    def ok(self) -> bool:
        return False


LawResult = Union[ValidLaw, InvalidLaw]


def lookup_law(query: str, client: RiksdagenClient | None = None, mode: Mode = "metadata") -> LawResult:
    """
    parse -> fetch -> extract. The first LawError short-circuits and is
    returned as an InvalidLaw; anything else propagates.
    """
    if mode not in ("metadata", "text"):
        raise ValueError(f"Unknown lookup mode: {mode}")

    client = client or get_client()
    law_id: Optional[LawID] = None
    try:
        law_id = LawID.parse(query)
        xml = client.fetch_document_xml(law_id)
        if mode == "text":
            document: Union[LawMetadata, LawText] = parse_law_text(xml)
        else:
            document = parse_law_metadata(xml)
    except LawError as e:
        logger.info("Lookup of %r failed: %s", query, e)
        return InvalidLaw(law_id=law_id, error=e.message)

    logger.info("Lookup of %s succeeded", law_id)
    return ValidLaw(law_id=law_id, document=document)


def render_result(result: LawResult) -> str:
    if isinstance(result, InvalidLaw):
        if result.law_id is None:
            return result.error
        return f"{result.law_id}: {result.error}"

    doc = result.document
    if isinstance(doc, LawText):
        head = f"SFS {doc.designation or result.law_id}"
        if doc.date:
            head = f"{head} ({doc.date})"
        return f"{head}\n{doc.title}\n\n{doc.text}".rstrip()

    lines = [f"SFS {result.law_id}"]
    for f in fields(doc):
        if f.name in _METADATA_LABELS:
            lines.append(f"{_METADATA_LABELS[f.name]}: {getattr(doc, f.name)}")
    return "\n".join(lines)
