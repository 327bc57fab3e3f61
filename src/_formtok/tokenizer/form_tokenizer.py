from enum import Enum, auto, unique

from _formtok.tokenizer.common import (
    CLOSE,
    ESCAPABLE,
    ESCAPE,
    OPEN,
    QUOTE_TOGGLE,
    is_atom_char,
    is_delimiter,
    is_whitespace,
)
from _formtok.tokenizer.errors import LexError, LexErrorKind
from _formtok.tokenizer.token import Token
from _formtok.tokenizer.token_kind import TokenKind


@unique
class State(Enum):
    START = auto()
    TEXT = auto()
    FORM = auto()
    AFTER_FORM_OPEN = auto()
    CLOSE = auto()
    ATOM = auto()
    AFTER_ITEM = auto()
    EOF = auto()


class FormTokenizer:
    """
    Tokenizer for form notation, ie. "(atom text (atom) text)".

    The tokenizer is a state machine where each state reads from the current
    position and returns the next state, or None once the end of file tokens
    have been emitted. A FormTokenizer is used for one input only:

        >>> [str(t) for t in FormTokenizer("(a)").tokenize()][:3]
        ['FormStart{0: `(`}', 'Atom{1: `a`}', 'FormEnd{2: `)`}']

    Text tokens keep escape sequences verbatim, see Token.
    """

    def __init__(self, source):
        """
        :param source: A str with the form notation to tokenize.
        """
        if not isinstance(source, str):
            raise TypeError(f"Expected str to tokenize, got {type(source).__name__}")
        self.source = source
        self.pos = 0
        self.tokens = []
        self.state = State.START
        self._transitions = {
            State.START: self.tokenize_start,
            State.TEXT: self.tokenize_text,
            State.FORM: self.tokenize_form,
            State.AFTER_FORM_OPEN: self.tokenize_after_form_open,
            State.CLOSE: self.tokenize_close,
            State.ATOM: self.tokenize_atom,
            State.AFTER_ITEM: self.tokenize_after_item,
            State.EOF: self.tokenize_eof,
        }

    def __iter__(self):
        return iter(self.tokenize())

    def tokenize(self):
        """
        Run the state machine until the end of input.

        :raises LexError: On invalid escapes or malformed form starts.
        :returns: List of tokens, always ending with the tokens for "(eof)".
        """
        while self.state is not None:
            self.state = self._transitions[self.state]()
        return self.tokens

    @property
    def at_end(self):
        return self.pos >= len(self.source)

    @property
    def current(self):
        return self.source[self.pos]

    def emit(self, kind, text, position):
        self.tokens.append(Token(kind, text, position))

    def skip_whitespace(self):
        while not self.at_end and is_whitespace(self.current):
            self.pos += 1

    def tokenize_start(self):
        self.skip_whitespace()
        if self.at_end:
            return State.EOF
        if self.current == OPEN:
            return State.FORM
        return State.TEXT

    def tokenize_text(self):
        self.skip_whitespace()
        if self.at_end:
            return State.EOF
        end = self.scan_text(self.pos)
        self.emit(TokenKind.TEXT, self.source[self.pos : end], self.pos)
        self.pos = end
        return State.AFTER_ITEM

    def scan_text(self, start):
        """
        Scan text from start until an unquoted delimiter or end of input.

        :returns: The end offset (exclusive) of the text.
        """
        source = self.source
        end = start
        quoted = False
        while end < len(source) and (quoted or not is_delimiter(source[end])):
            if source[end] == ESCAPE:
                following = source[end + 1] if end + 1 < len(source) else None
                if following == QUOTE_TOGGLE:
                    quoted = not quoted
                elif following not in ESCAPABLE:
                    raise LexError(LexErrorKind.INVALID_ESCAPE, end)
                end += 1
            end += 1
        return end

    def tokenize_form(self):
        self.emit(TokenKind.FORM_START, OPEN, self.pos)
        self.pos += 1
        return State.AFTER_FORM_OPEN

    def tokenize_after_form_open(self):
        self.skip_whitespace()
        if self.at_end:
            return State.EOF
        if self.current == OPEN:
            raise LexError(LexErrorKind.EXPECTED_ATOM_OR_CLOSE, self.pos)
        if self.current == CLOSE:
            return State.CLOSE
        return State.ATOM

    def tokenize_close(self):
        self.emit(TokenKind.FORM_END, CLOSE, self.pos)
        self.pos += 1
        return State.AFTER_ITEM

    def tokenize_atom(self):
        end = self.pos
        while end < len(self.source) and is_atom_char(self.source[end]):
            end += 1
        if end == self.pos:
            raise LexError(LexErrorKind.EMPTY_ATOM, self.pos)
        self.emit(TokenKind.ATOM, self.source[self.pos : end], self.pos)
        self.pos = end
        return State.AFTER_ITEM

    def tokenize_after_item(self):
        self.skip_whitespace()
        if self.at_end:
            return State.EOF
        if self.current == CLOSE:
            return State.CLOSE
        if self.current == OPEN:
            return State.FORM
        return State.TEXT

    def tokenize_eof(self):
        self.emit(TokenKind.FORM_START, OPEN, self.pos)
        self.emit(TokenKind.ATOM, "eof", self.pos)
        self.emit(TokenKind.FORM_END, CLOSE, self.pos)
        return None


def tokenize(source):
    """
    Tokenize form notation.

    :param source: A str with the form notation.
    :raises LexError: If source contains an invalid escape or a malformed
        form start. No partial list of tokens is available in that case.
    :returns: List of Token, always ending with the three tokens for "(eof)"
        placed at the end of source.
    """
    return FormTokenizer(source).tokenize()
