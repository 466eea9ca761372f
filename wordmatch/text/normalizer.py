"""Text normalization stage.

Responsibilities:
- Replace confusable characters through an injected substitution function.
- Case-fold the substituted text so matching is case-insensitive.
"""

from __future__ import annotations

from typing import Callable

from .confusables import DEFAULT_CONFUSABLES


class TextNormalizer:
    """Normalize raw text into its canonical, lowercase representation."""

    def __init__(self, substitute: Callable[[str], str] | None = None) -> None:
        """Initialize with a confusable substitution function or the default table."""

        self._substitute = substitute or DEFAULT_CONFUSABLES.replace

    def normalize(self, text: str) -> str:
        """Return `text` with confusables replaced and lowercased."""

        return self._substitute(text).lower()


DEFAULT_NORMALIZER = TextNormalizer()


def normalize(text: str) -> str:
    """Normalize text with the default confusable table."""

    return DEFAULT_NORMALIZER.normalize(text)
