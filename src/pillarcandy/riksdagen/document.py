from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from lxml import etree

from pillarcandy.riksdagen.errors import DataFormatError, DocumentParseError

logger = logging.getLogger(__name__)

# attribute -> tag under dokumentstatus/dokument
LAW_FIELDS: Dict[str, str] = {
    "year": "rm",
    "number": "nummer",
    "title": "titel",
    "sub_title": "subtitel",
    "doc_type": "typ",
    "sub_type": "subtyp",
    "department": "organ",
    "date": "datum",
    "published": "publicerad",
}

TEXT_FIELDS: Dict[str, str] = {
    "designation": "beteckning",
    "date": "datum",
    "title": "titel",
    "text": "text",
}


@dataclass(frozen=True)
class LawMetadata:
    year: str
    number: str
    title: str
    sub_title: str
    doc_type: str
    sub_type: str
    department: str
    date: str
    published: str
    # Never populated: references between laws are not resolved.
    refs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LawText:
    designation: str
    date: str
    title: str
    text: str


def _txt(el: Optional[etree._Element]) -> str:
    if el is None:
        return ""
    return "".join(el.itertext()).strip()


def _normalize_body(text: str) -> str:
    # strip each line, collapse runs of blank lines
    out: list[str] = []
    for line in text.splitlines():
        line = " ".join(line.split())
        if not line and (not out or not out[-1]):
            continue
        out.append(line)
    while out and not out[-1]:
        out.pop()
    return "\n".join(out)


def _document_node(xml: str) -> etree._Element:
    if not xml or not xml.strip():
        raise DocumentParseError("Empty document body.")

    parser = etree.XMLParser(recover=True, huge_tree=True)
    try:
        root = etree.fromstring(xml.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as e:
        raise DocumentParseError(f"Document body could not be parsed as XML: {e}") from e

    if root is None:
        raise DocumentParseError()

    nodes = root.xpath("descendant-or-self::dokumentstatus//dokument")
    if not nodes:
        raise DataFormatError("Law does not contain valid information: no dokumentstatus/dokument node.")
    return nodes[0]


def _extract(xml: str, fields: Dict[str, str]) -> Dict[str, str]:
    node = _document_node(xml)

    values: Dict[str, str] = {}
    missing: list[str] = []
    for attr, tag in fields.items():
        el = node.find(tag)
        if el is None:
            missing.append(tag)
            continue
        values[attr] = _txt(el)

    if missing:
        logger.warning("Document is missing tags: %s", ", ".join(missing))
        raise DataFormatError(
            f"Law does not contain valid information: missing {', '.join(missing)}."
        )
    return values


def parse_law_metadata(xml: str) -> LawMetadata:
    """Extract the nine metadata fields of a dokumentstatus document."""
    return LawMetadata(**_extract(xml, LAW_FIELDS))


def parse_law_text(xml: str) -> LawText:
    """Extract designation, date, title and the statute body."""
    values = _extract(xml, TEXT_FIELDS)
    values["text"] = _normalize_body(values["text"])
    return LawText(**values)
