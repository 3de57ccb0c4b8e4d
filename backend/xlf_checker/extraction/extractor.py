"""Segment Extractor — turns raw XLIFF text into translation units.

Only the minimal (id, source, target) triples are read. Everything else in
the document (notes, metadata, file attributes) is ignored.

Usage:
    units = extract(xliff_text)
"""

from typing import Optional, Union

import structlog
from lxml import etree

from xlf_checker.extraction.errors import ParseError
from xlf_checker.rules.models import TranslationUnit

logger = structlog.get_logger()


def _make_parser(encoding: Optional[str] = None) -> etree.XMLParser:
    """Secure parser: no entity expansion, no network, no huge trees.

    A given encoding overrides whatever the XML declaration names.
    """
    return etree.XMLParser(
        encoding=encoding,
        remove_blank_text=False,
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
    )


def parse_document(document: Union[str, bytes]) -> etree._Element:
    """Parse document text into an element tree root.

    Raises:
        ParseError: If the document is not well-formed
    """
    encoding = None
    if isinstance(document, str):
        # Already decoded text: the declared encoding no longer applies
        document = document.encode("utf-8")
        encoding = "utf-8"
    if not document.strip():
        raise ParseError("Document is empty")

    try:
        root = etree.fromstring(document, _make_parser(encoding))
    except etree.XMLSyntaxError as e:
        message = str(e) if e.msg else ""
        logger.warning("document_parse_failed", error=message or None)
        raise ParseError(message) from e

    return root


def _local_name(element: etree._Element) -> Optional[str]:
    # Comments and processing instructions have no string tag
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def _descendants(element: etree._Element, name: str) -> list[etree._Element]:
    """All descendant elements with the given local name, in document order."""
    return [el for el in element.iterdescendants() if _local_name(el) == name]


def _first_descendant(element: etree._Element, name: str) -> Optional[etree._Element]:
    return next(
        (el for el in element.iterdescendants() if _local_name(el) == name), None
    )


def _text_content(element: etree._Element) -> str:
    """Concatenated text of all descendant text nodes, comments excluded."""
    return str(element.xpath("string()"))


def extract_units(root: etree._Element) -> list[TranslationUnit]:
    """Collect translation units from a parsed document, in document order.

    A unit without a segment, or whose segment lacks a source or target,
    is skipped silently.
    """
    units: list[TranslationUnit] = []
    candidates = [root] if _local_name(root) == "unit" else []
    candidates.extend(_descendants(root, "unit"))

    for unit_el in candidates:
        segment = _first_descendant(unit_el, "segment")
        if segment is None:
            continue

        source_el = _first_descendant(segment, "source")
        target_el = _first_descendant(segment, "target")
        if source_el is None or target_el is None:
            continue

        units.append(TranslationUnit(
            id=unit_el.get("id") or "",
            source=_text_content(source_el),
            target=_text_content(target_el),
        ))

    return units


def extract(document: Union[str, bytes]) -> list[TranslationUnit]:
    """Parse a document and extract its translation units.

    Args:
        document: Raw XLIFF text

    Returns:
        Units in document order

    Raises:
        ParseError: If the document is not well-formed; nothing is extracted
    """
    units = extract_units(parse_document(document))
    logger.debug("units_extracted", count=len(units))
    return units
