"""
In this module, a tokenizer is a state machine that takes a str of form
notation and produces a list of tokens. If an error occurs, tokenization stops
and a LexError is raised, giving the kind of error and the offset at which
it was found.

Form notation consists of parenthesized forms that start with an atom,
followed by atoms, text and other forms, ie.

    (section intro some text (bold more text))

Text ends at an unescaped parenthesis. Within text, \\( \\) and \\\\ are
escaped literals and \\+ toggles a quoted span in which parentheses do
not end the text. The tokenizer does not remove escapes from text tokens.

All offsets are code point offsets into the str given to the tokenizer.
"""

from .errors import LexError, LexErrorKind, TokenizationError
from .form_tokenizer import FormTokenizer, State, tokenize
from .token import Token, visible_string
from .token_kind import TokenKind

__all__ = [
    "FormTokenizer",
    "LexError",
    "LexErrorKind",
    "State",
    "Token",
    "TokenKind",
    "TokenizationError",
    "tokenize",
    "visible_string",
]
