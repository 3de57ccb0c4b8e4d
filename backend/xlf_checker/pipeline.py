"""Document pipeline — raw XLIFF text in, lint report out.

The single entry point for callers that hold document text:

    from xlf_checker.pipeline import run_all_checks

    try:
        report = run_all_checks(xliff_text)
    except ParseError as e:
        # No report; show e.message
"""

from typing import Optional, Union

from xlf_checker.extraction import extract
from xlf_checker.rules import LintReport, RuleEngine, rule_engine


def run_all_checks(
    document: Union[str, bytes], engine: Optional[RuleEngine] = None
) -> LintReport:
    """Extract the units of a document and run every rule over them.

    Args:
        document: Raw XLIFF text
        engine: Rule engine to use. If None, uses the default battery.

    Returns:
        LintReport for the whole document

    Raises:
        ParseError: If the document is not well-formed; no rule runs
    """
    units = extract(document)
    return (engine or rule_engine).run(units)
