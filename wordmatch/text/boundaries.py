"""Single-pass word boundary scanning over canonical text.

Responsibilities:
- Classify every canonical character as a word start, interior, end,
  single-character word, or non-word filler.
- Record a start marker for every detected word.
- Allocate the per-character `checked` flags consumed by matcher code.

Key types:
- `BoundaryScanner`: stateless scanner producing a `BoundaryScan`.
"""

from __future__ import annotations

import unicodedata

from ..models.datatypes import Boundary, BoundaryScan, WordMarker

_CONTROL_CATEGORY = "Cc"


def is_filler(character: str) -> bool:
    """Return whether a character is whitespace or a control character."""

    return character.isspace() or unicodedata.category(character) == _CONTROL_CATEGORY


class BoundaryScanner:
    """Classify word boundaries with one character of lookahead."""

    def scan(self, canonical: str) -> BoundaryScan:
        """Scan canonical text left to right and return its boundary annotation.

        The only state carried between characters is the previously emitted
        boundary. Word markers are recorded as `(index, index)` when a word
        begins and are never widened to the word's end.
        """

        boundaries: list[Boundary] = []
        checked: list[bool] = []
        word_markers: list[WordMarker] = []
        length = len(canonical)

        for index, character in enumerate(canonical):
            if is_filler(character):
                boundary = Boundary.NO_CONTENT
            elif boundaries and boundaries[-1].is_word():
                boundary = Boundary.WORD
            else:
                boundary = Boundary.START

            if boundary is not Boundary.NO_CONTENT:
                next_index = index + 1
                word_ends = next_index >= length or is_filler(canonical[next_index])
                if boundary is Boundary.START:
                    word_markers.append((index, index))
                    if word_ends:
                        boundary = Boundary.MIXED
                elif word_ends:
                    boundary = Boundary.END

            checked.append(False)
            boundaries.append(boundary)

        return BoundaryScan(
            boundaries=tuple(boundaries),
            checked=checked,
            word_markers=tuple(word_markers),
        )
