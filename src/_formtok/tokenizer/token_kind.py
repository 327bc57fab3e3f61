from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    FORM_START = auto()
    ATOM = auto()
    TEXT = auto()
    FORM_END = auto()

    def __str__(self):
        return "".join(part.capitalize() for part in self.name.split("_"))
