from enum import Enum


class TagName(Enum):
    DIV = "div"
    P = "p"
    B = "b"
    IMG = "img"

    @property
    def is_container(self) -> bool:
        return self is not TagName.IMG

    @property
    def mnemonic(self) -> str:
        return self.value.upper()


class LexemeKind(Enum):
    OPENING = "opening"
    CLOSING = "closing"
    SELF_CLOSING = "self_closing"
