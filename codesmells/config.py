"""
Literal whitelists.

Literals whose source text matches a whitelisted value are never
reported as magic attributes.
"""
from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Whitelists:
    numbers:    Tuple[float, ...] = (-1, 0, 1)
    strings:    Tuple[str, ...]   = ("",)
    characters: Tuple[str, ...]   = ("\0", "\r", "\n")

    def extended(
        self,
        numbers: Iterable[float] = (),
        strings: Iterable[str] = (),
        characters: Iterable[str] = (),
    ) -> "Whitelists":
        """Return a copy with extra entries appended to each list."""
        characters = tuple(characters)
        for char in characters:
            if len(char) != 1:
                raise ValueError(f"Character whitelist entries must be one character: {char!r}")

        return Whitelists(
            numbers=self.numbers + tuple(numbers),
            strings=self.strings + tuple(strings),
            characters=self.characters + characters,
        )


DEFAULT_WHITELISTS = Whitelists()
