"""Core datatypes shared across wordmatch modules.

Responsibilities:
- Represent the per-character boundary classification of a scanned sentence.
- Provide explicit typing for scanner output handed to matcher code.

Key types:
- `Boundary`, `WordMarker`, and `BoundaryScan`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

WordMarker = tuple[int, int]


class Boundary(Enum):
    """Role of one canonical character within word segmentation.

    Attributes:
        START: First character of a word, followed by more word characters.
        WORD: Inner character of a multi-character word.
        END: Last character of a multi-character word.
        MIXED: Single character that is both the start and the end of a word.
        NO_CONTENT: Whitespace or control character, never part of a word.
    """

    START = "start"
    WORD = "word"
    END = "end"
    MIXED = "mixed"
    NO_CONTENT = "no_content"

    def is_word(self) -> bool:
        """Return whether this boundary belongs to a word."""

        match self:
            case Boundary.START | Boundary.WORD | Boundary.END | Boundary.MIXED:
                return True
            case Boundary.NO_CONTENT:
                return False


@dataclass(frozen=True, slots=True)
class BoundaryScan:
    """Parallel outputs of one boundary scan over canonical text.

    Attributes:
        boundaries: One `Boundary` per canonical character.
        checked: One `False` flag per canonical character, owned by the caller.
        word_markers: One `(start, start)` marker per word, in text order.
    """

    boundaries: tuple[Boundary, ...] = ()
    checked: list[bool] = field(default_factory=list)
    word_markers: tuple[WordMarker, ...] = ()
