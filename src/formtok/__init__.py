import formtok.version
from _formtok.location import SourceLocation, locate
from _formtok.tokenizer import (
    FormTokenizer,
    LexError,
    LexErrorKind,
    Token,
    TokenizationError,
    TokenKind,
    tokenize,
    visible_string,
)

__version__ = formtok.version.version

__all__ = [
    "FormTokenizer",
    "LexError",
    "LexErrorKind",
    "SourceLocation",
    "Token",
    "TokenKind",
    "TokenizationError",
    "locate",
    "tokenize",
    "visible_string",
]
