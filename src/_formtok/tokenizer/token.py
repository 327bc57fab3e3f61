from dataclasses import dataclass

from _formtok.tokenizer.token_kind import TokenKind

ASCII_CONTROL_NAMES = (
    "<NUL>",
    "<SOH>",
    "<STX>",
    "<ETX>",
    "<EOT>",
    "<ENQ>",
    "<ACK>",
    "\\a",
    "\\b",
    "\\t",
    "\\n",
    "\\v",
    "\\f",
    "\\r",
    "<SO>",
    "<SI>",
    "<DLE>",
    "<DC1>",
    "<DC2>",
    "<DC3>",
    "<DC4>",
    "<NAK>",
    "<SYN>",
    "<ETB>",
    "<CAN>",
    "<EM>",
    "<SUB>",
    "<ESC>",
    "<FS>",
    "<GS>",
    "<RS>",
    "<US>",
)


def visible_char(char):
    code = ord(char)
    if 32 <= code <= 126:
        return char
    elif code == 127:
        return "<DEL>"
    elif code < 32:
        return ASCII_CONTROL_NAMES[code]
    else:
        return f"<U+{code:04X}>"


def visible_string(text):
    """
    Render text for logs and error messages, ie. visible_string("a\\tb")
    gives "a\\\\tb" and visible_string("λ") gives "<U+03BB>".

    Printable ascii is kept as is, control characters are replaced with
    their escape mnemonic or bracketed ascii name, DEL with "<DEL>" and
    anything outside ascii with a bracketed unicode code point.
    """
    return "".join(visible_char(c) for c in text)


@dataclass(frozen=True)
class Token:
    """
    A token in form notation.

    text is the exact slice of the input covered by the token. For
    TokenKind.TEXT this means backslash escapes such as \\( and \\+ are
    kept as written, it is up to the consumer of the tokens to
    unescape them.

    position is the offset (in code points, not bytes) of the first
    character of the token in the input.
    """

    kind: TokenKind
    text: str
    position: int

    @property
    def end(self):
        return self.position + len(self.text)

    def __str__(self):
        return f"{self.kind!s}{{{self.position}: `{visible_string(self.text)}`}}"
