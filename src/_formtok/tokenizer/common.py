WHITESPACE = frozenset(" \n\r\t\v\f")

# Characters that may follow a backslash as an escaped literal
ESCAPABLE = frozenset("()\\")

ESCAPE = "\\"
QUOTE_TOGGLE = "+"
OPEN = "("
CLOSE = ")"


def is_whitespace(char):
    return char in WHITESPACE


def is_alpha(char):
    return "a" <= char <= "z" or char == "-"


def is_num(char):
    return "0" <= char <= "9"


def is_atom_char(char):
    """
    Atoms consist of lowercase ascii letters, hyphens and ascii digits.
    """
    return is_alpha(char) or is_num(char)


def is_delimiter(char):
    return char in (OPEN, CLOSE)
