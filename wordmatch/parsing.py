"""Value parsing helpers shared by the YAML and environment config loaders."""

from __future__ import annotations


_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return the trimmed text of `value`, or `None` for missing or blank input.

    Args:
        value: Raw value read from YAML or the environment.

    Returns:
        Text with surrounding whitespace removed, or `None` when nothing is left.
    """

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Accept real booleans and case-insensitive tokens, else return `None`."""

    if isinstance(value, bool):
        return value
    token = normalize_optional_string(value)
    if token is None:
        return None
    token = token.lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None
