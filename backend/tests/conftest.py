"""Shared fixtures: XLIFF documents and unit builders."""

import pytest

from xlf_checker.rules import TranslationUnit


def make_xliff(*units: str) -> str:
    """Wrap unit markup in an XLIFF 2.0 document."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<xliff xmlns="urn:oasis:names:tc:xliff:document:2.0" version="2.0" '
        'srcLang="en" trgLang="fr">\n'
        '<file id="f1">\n'
        + "\n".join(units)
        + "\n</file>\n</xliff>\n"
    )


def make_unit(unit_id: str, source: str, target: str) -> str:
    return (
        f'<unit id="{unit_id}"><segment>'
        f"<source>{source}</source><target>{target}</target>"
        "</segment></unit>"
    )


@pytest.fixture
def unit():
    """Factory for in-memory translation units."""
    def _unit(source: str, target: str, unit_id: str = "u1") -> TranslationUnit:
        return TranslationUnit(id=unit_id, source=source, target=target)
    return _unit


@pytest.fixture
def mixed_document():
    """Document with one clean unit and one unit per defect."""
    return make_xliff(
        make_unit("clean", "Hello %{name}", "Bonjour %{name}"),
        make_unit("encoding", "Tom &amp;amp; Jerry", "Tom et Jerry"),
        make_unit("var_count", "Hello %{name}", "Bonjour"),
        make_unit("bare_brace", "Hello {name}", "Bonjour {name}"),
        make_unit("plural_bars", "one|||other", "un||||autre"),
        make_unit("plural_count", "one||||many", "un seul"),
    )
