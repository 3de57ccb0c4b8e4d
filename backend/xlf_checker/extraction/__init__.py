"""Segment extraction — raw XLIFF text to translation units.

Usage:
    from xlf_checker.extraction import extract, ParseError

    try:
        units = extract(xliff_text)
    except ParseError as e:
        # Show e.message to the user
"""

from xlf_checker.extraction.errors import ParseError
from xlf_checker.extraction.extractor import extract, extract_units, parse_document

__all__ = [
    "ParseError",
    "extract",
    "extract_units",
    "parse_document",
]
