"""Header field parameters of the form ``name=value``."""

from __future__ import annotations

_BLANKS = " \t"
_SPECIALS = frozenset('()\\<>"@,;:/[]?=')


def remove_external_blanks(text: str) -> str:
    """Return *text* without leading and trailing spaces and tabs."""
    return text.strip(_BLANKS)


def remove_dquote(text: str) -> str:
    """Return *text* without one pair of enclosing double quotes, if present."""
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


class IString(str):
    """A string that compares and hashes case-insensitively."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, str):
            return NotImplemented
        return self.lower() == other.lower()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self.lower())


class FieldParam:
    """A single ``name=value`` parameter of a structured header field."""

    def __init__(self, name: str = "", value: str = "") -> None:
        self.name = name
        self.value = value

    @property
    def name(self) -> IString:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = IString(name)

    @classmethod
    def parse(cls, text: str) -> "FieldParam":
        """Parse ``name = value``; without an ``=`` both parts are empty."""
        name, sep, value = text.partition("=")
        if not sep:
            return cls()
        return cls(
            remove_external_blanks(name),
            remove_dquote(remove_external_blanks(value)),
        )

    def __str__(self) -> str:
        if any(ch in _SPECIALS for ch in self.value):
            return f'{self.name}="{self.value}"'
        return f"{self.name}={self.value}"

    def __repr__(self) -> str:
        return f"FieldParam(name={str(self.name)!r}, value={self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldParam):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.name, self.value))