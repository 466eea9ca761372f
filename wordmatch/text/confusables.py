"""Confusable (homoglyph) substitution table.

Responsibilities:
- Map visually confusable characters onto a canonical Latin form.
- Fold compatibility variants (mathematical, enclosed, fullwidth letters) and
  strip combining marks so accented lookalikes collapse onto their base letter.
- Stay immutable after construction so one table can be shared process-wide.

Key types:
- `ConfusableTable`: injectable per-character lookup with `replace`.
- `DEFAULT_CONFUSABLES`: the built-in table used when no table is injected.
"""

from __future__ import annotations

from functools import lru_cache
from string import ascii_lowercase, ascii_uppercase
from types import MappingProxyType
from typing import Mapping
import unicodedata

_COMBINING_MARK_CATEGORY = "Mn"
# Case mappings only exist in the Basic and Supplementary Multilingual Planes.
_CASED_CODE_POINT_LIMIT = 0x20000

# Lookalikes with no compatibility decomposition onto Latin.
_LOOKALIKES: dict[str, str] = {
    # Cyrillic
    "а": "a",
    "с": "c",
    "ԁ": "d",
    "е": "e",
    "һ": "h",
    "і": "i",
    "ј": "j",
    "ӏ": "l",
    "Ӏ": "l",
    "о": "o",
    "р": "p",
    "ԛ": "q",
    "ѕ": "s",
    "ԝ": "w",
    "х": "x",
    "у": "y",
    "В": "B",
    "Н": "H",
    "К": "K",
    "М": "M",
    "Т": "T",
    # Greek
    "α": "a",
    "ι": "i",
    "κ": "k",
    "ν": "v",
    "ο": "o",
    "ρ": "p",
    "υ": "u",
    "ω": "w",
    "Β": "B",
    "Ε": "E",
    "Ζ": "Z",
    "Η": "H",
    "Ι": "l",
    "Μ": "M",
    "Ν": "N",
    "Τ": "T",
    "Χ": "X",
    "Υ": "Y",
    # Latin extensions and IPA
    "I": "l",
    "ı": "l",
    "ɑ": "a",
    "ɡ": "g",
    "ɩ": "i",
    "ɼ": "r",
    "ɽ": "r",
    "ɾ": "r",
    "ʀ": "r",
    "ʙ": "b",
    "ɢ": "g",
    "ʜ": "h",
    "ɪ": "i",
    "ʟ": "l",
    "ɴ": "n",
    "ᴏ": "o",
    # Cherokee
    "Ꭺ": "A",
    "Ᏼ": "B",
    "Ꮯ": "C",
    "Ꭼ": "E",
    "Ꮋ": "H",
    "Ꮶ": "K",
    "Ꮇ": "M",
    "Ꮲ": "P",
    "Ꭱ": "R",
    "Ꮪ": "S",
    "Ꮤ": "T",
    "Ꮃ": "W",
    # Canadian syllabics
    "ᑲ": "b",
    "ᑫ": "q",
    "ᑯ": "d",
    "ᑱ": "d",
    "ᕼ": "H",
    # Digits
    "0": "o",
    "1": "l",
}

# Parenthesized letters decompose to "(x)", which would split one letter into three.
_PARENTHESIZED_SMALL_START = 0x249C
_PARENTHESIZED_CAPITAL_START = 0x1F110


def _parenthesized_letters() -> dict[str, str]:
    """Return mappings for parenthesized Latin letters onto their bare letter."""

    mapping = {
        chr(_PARENTHESIZED_SMALL_START + offset): letter
        for offset, letter in enumerate(ascii_lowercase)
    }
    mapping.update(
        {
            chr(_PARENTHESIZED_CAPITAL_START + offset): letter
            for offset, letter in enumerate(ascii_uppercase)
        }
    )
    return mapping


def _validate_mapping(mapping: Mapping[str, str]) -> dict[str, str]:
    """Validate single-character keys and non-empty string replacements."""

    validated: dict[str, str] = {}
    for key, value in mapping.items():
        if not isinstance(key, str) or len(key) != 1:
            raise ValueError(f"Confusable key {key!r} must be exactly one character.")
        if not isinstance(value, str) or not value:
            raise ValueError(
                f"Confusable replacement for {key!r} must be a non-empty string."
            )
        validated[key] = value
    return validated


@lru_cache(maxsize=1)
def _lowercase_sources() -> dict[str, tuple[str, ...]]:
    """Index every cased character by the characters its lowercase form contains."""

    sources: dict[str, list[str]] = {}
    for code_point in range(_CASED_CODE_POINT_LIMIT):
        character = chr(code_point)
        lowered = character.lower()
        if lowered == character:
            continue
        for part in set(lowered):
            sources.setdefault(part, []).append(character)
    return {part: tuple(characters) for part, characters in sources.items()}


class ConfusableTable:
    """Immutable per-character confusable substitution table."""

    def __init__(
        self,
        mapping: Mapping[str, str] | None = None,
        *,
        decompose: bool = True,
    ) -> None:
        """Build a table from explicit mappings.

        Args:
            mapping: Explicit character replacements, applied before decomposition.
            decompose: Whether unmapped characters are NFKD-folded with combining
                marks removed before the explicit mapping is applied again.

        Raises:
            ValueError: If a key is not a single character or a value is empty.
        """

        explicit = _validate_mapping(mapping or {})
        entries = dict(explicit)
        # Cased characters lowering onto a key, so lowercased output stays canonical.
        for key in explicit:
            for source in _lowercase_sources().get(key, ()):
                if source not in entries:
                    entries[source] = "".join(
                        explicit.get(part, part) for part in source.lower()
                    )

        self._explicit = MappingProxyType(explicit)
        self._entries = MappingProxyType(entries)
        self._decompose = decompose

    @property
    def decompose(self) -> bool:
        """Return whether compatibility decomposition is applied."""

        return self._decompose

    @property
    def explicit(self) -> Mapping[str, str]:
        """Return the explicit mappings the table was built from."""

        return self._explicit

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, character: object) -> bool:
        return character in self._entries

    def lookup(self, character: str) -> str:
        """Return the canonical replacement for one character."""

        replacement = self._entries.get(character)
        if replacement is not None:
            return replacement
        if not self._decompose:
            return character

        decomposed = unicodedata.normalize("NFKD", character)
        base = "".join(
            part
            for part in decomposed
            if unicodedata.category(part) != _COMBINING_MARK_CATEGORY
        )
        if base == character:
            return character
        base = unicodedata.normalize("NFKC", base)
        return "".join(self._entries.get(part, part) for part in base)

    def replace(self, text: str) -> str:
        """Replace every confusable character in `text` with its canonical form."""

        return "".join(self.lookup(character) for character in text)

    def extended(self, extra: Mapping[str, str]) -> ConfusableTable:
        """Return a new table with `extra` layered over the explicit mappings."""

        merged = dict(self._explicit)
        merged.update(extra)
        return ConfusableTable(merged, decompose=self._decompose)


DEFAULT_CONFUSABLES = ConfusableTable({**_LOOKALIKES, **_parenthesized_letters()})
