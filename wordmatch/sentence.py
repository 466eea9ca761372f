"""Normalized sentence model consumed by word matchers.

Responsibilities:
- Normalize raw text once and annotate each canonical character with its
  word boundary.
- Own the mutable per-character `checked` flags that matcher code sets to
  avoid re-processing overlapping hits.

Key types:
- `Sentence`: canonical characters plus boundaries, checked flags, and word
  start markers.

`checked` is not synchronized. Matchers sharing one `Sentence` across threads
must serialize their writes or partition them into disjoint index ranges.
"""

from __future__ import annotations

from .models.datatypes import Boundary, WordMarker
from .text.boundaries import BoundaryScanner
from .text.normalizer import DEFAULT_NORMALIZER, TextNormalizer

_DEFAULT_SCANNER = BoundaryScanner()


class Sentence:
    """A normalized text annotated with word boundaries.

    Attributes:
        checked: One flag per canonical character, all `False` after construction.
            Matchers set entries to `True` once a match accounts for them.
    """

    __slots__ = ("checked", "_contents", "_boundaries", "_word_markers_list")

    def __init__(
        self,
        text: str,
        normalizer: TextNormalizer | None = None,
        scanner: BoundaryScanner | None = None,
    ) -> None:
        """Normalize `text` and scan its boundaries."""

        canonical = (normalizer or DEFAULT_NORMALIZER).normalize(text)
        scan = (scanner or _DEFAULT_SCANNER).scan(canonical)

        self.checked: list[bool] = scan.checked
        self._contents: tuple[str, ...] = tuple(canonical)
        self._boundaries = scan.boundaries
        self._word_markers_list = scan.word_markers

    @property
    def contents(self) -> tuple[str, ...]:
        """Return the canonical characters."""

        return self._contents

    @property
    def boundaries(self) -> tuple[Boundary, ...]:
        """Return one boundary per canonical character."""

        return self._boundaries

    @property
    def length(self) -> int:
        """Return the number of canonical characters."""

        return len(self._contents)

    @property
    def _word_markers(self) -> tuple[WordMarker, ...]:
        """Return word start markers for matcher code inside this package.

        Each marker is `(start, start)`; the end offset is not tracked.
        """

        return self._word_markers_list

    def words(self) -> list[tuple[int, int]]:
        """Return `(start, end)` extents of each word, `end` exclusive."""

        extents: list[tuple[int, int]] = []
        start = 0
        for index, boundary in enumerate(self._boundaries):
            if boundary is Boundary.START:
                start = index
            elif boundary is Boundary.MIXED:
                extents.append((index, index + 1))
            elif boundary is Boundary.END:
                extents.append((start, index + 1))
        return extents

    def render(self) -> str:
        """Return the normalized text, not the original input."""

        return "".join(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Sentence({self.render()!r})"
