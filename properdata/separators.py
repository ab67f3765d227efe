"""Key/value separator tokens recognised in properties files."""

from enum import Enum


class KeyValueSeparator(Enum):
    """Delimiter between key and value. Chosen once per store, matched literally."""

    EQUALS = "="
    COLON = ":"
    ARROW = "->"
    FAT_ARROW = "=>"
    DOUBLE_COLON = "::"
    SPACE = " "
    TAB = "\t"
    PIPE = "|"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, text: str) -> "KeyValueSeparator":
        """Resolve by member name (any case) or by the token itself."""
        for member in cls:
            if member.name == text.strip().upper() or member.value == text:
                return member
        raise ValueError(f"Unknown key value separator: {text!r}")
