from enum import Enum, unique

from _formtok.location import locate


class TokenizationError(Exception):
    """
    Base class for errors raised while tokenizing form notation.
    """

    pass


@unique
class LexErrorKind(Enum):
    INVALID_ESCAPE = "invalid escape"
    EXPECTED_ATOM_OR_CLOSE = "expected atom or close"
    EMPTY_ATOM = "empty atom"


class LexError(TokenizationError):
    """
    A fatal lexical error. Tokenization stops at the first LexError and no
    tokens are returned for the input.

    :param kind: The LexErrorKind of the error.
    :param position: The code point offset in the input where the error
        was detected.
    """

    def __init__(self, kind, position):
        self.kind = kind
        self.position = position
        super().__init__(f"{kind.value} at {position}")

    def locate(self, source):
        """
        :returns: The SourceLocation (line and column) of the error in
            the given source.
        """
        return locate(source, self.position)
