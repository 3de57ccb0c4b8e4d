"""Extraction errors."""

DEFAULT_PARSE_ERROR_MESSAGE = "Parsing Error"


class ParseError(Exception):
    """Raised when a document is not well-formed XML.

    The message is the parser's own diagnostic, meant to be shown verbatim.
    """

    def __init__(self, message: str = ""):
        self.message = message or DEFAULT_PARSE_ERROR_MESSAGE
        super().__init__(self.message)
