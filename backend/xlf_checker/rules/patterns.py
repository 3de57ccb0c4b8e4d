"""Shared patterns for the lint rules.

Placeholders, encoding artifacts and plural delimiters as they appear in
translation strings.
"""

import re

# Leaked or double-escaped HTML entities
ENCODING_ARTIFACTS = ("nbsp;", "&amp;")

# %{name}
PERCENT_VARIABLE = re.compile(r"%\{.*?\}")

# {name} without the % prefix
BARE_BRACE_VARIABLE = re.compile(r"(?<!%)\{.*?\}")

PLURAL_DELIMITER = "||||"

# 1-3 pipes with no pipe on either side
SHORT_PIPE_RUN = re.compile(r"(?<!\|)\|{1,3}(?!\|)")

LONG_PIPE_RUN = re.compile(r"\|{5,}")


def has_encoding_artifact(text: str) -> bool:
    return any(artifact in text for artifact in ENCODING_ARTIFACTS)


def count_percent_variables(text: str) -> int:
    return len(PERCENT_VARIABLE.findall(text))


def has_bare_brace_variable(text: str) -> bool:
    return BARE_BRACE_VARIABLE.search(text) is not None


def has_malformed_plural_bars(text: str) -> bool:
    """True if the text holds a pipe run other than the four-pipe delimiter."""
    return bool(SHORT_PIPE_RUN.search(text) or LONG_PIPE_RUN.search(text))


def count_plural_forms(text: str) -> int:
    """Number of non-blank pieces between plural delimiters."""
    return sum(1 for piece in text.split(PLURAL_DELIMITER) if piece.strip())
