"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from wordmatch.config import ConfigLoader, WordmatchConfig
from wordmatch.text.confusables import DEFAULT_CONFUSABLES


def test_config_loader_from_yaml_loads_valid_config(
    write_config: Callable[[str], Path],
) -> None:
    """YAML loader should parse typed and textual values."""

    config_path = write_config(
        """
output_format: " JSON "
builtin_confusables: "no"
decompose: true
confusables:
  "$": s
  "€": e
"""
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.output_format == "json"
    assert config.builtin_confusables is False
    assert config.decompose is True
    assert config.confusables == {"$": "s", "€": "e"}


def test_config_loader_from_yaml_empty_file_uses_defaults(
    write_config: Callable[[str], Path],
) -> None:
    """An empty YAML document should yield the default configuration."""

    config = ConfigLoader.from_yaml(write_config(""))

    assert config == WordmatchConfig()
    assert config.build_table() is DEFAULT_CONFUSABLES


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ("colour: red", "unsupported key(s): colour"),
        ("- text\n- json", "top-level mapping/object"),
        ("output_format: xml", "`output_format` must be one of: text, json."),
        ("decompose: maybe", "field `decompose` must be a boolean value"),
        ("confusables: [a, b]", "field `confusables` must be a mapping/object"),
        ("confusables:\n  ab: x", "key 'ab' must be one character"),
        ("confusables:\n  a: ''", "blank value for 'a'"),
    ],
)
def test_config_loader_from_yaml_rejects_invalid_payloads(
    write_config: Callable[[str], Path], payload: str, message: str
) -> None:
    """Invalid payloads should raise `ValueError` with an actionable message."""

    with pytest.raises(ValueError) as exc_info:
        ConfigLoader.from_yaml(write_config(payload))

    assert message in str(exc_info.value)


def test_config_loader_from_yaml_missing_file_raises(tmp_path: Path) -> None:
    """Missing config files should surface `FileNotFoundError`."""

    with pytest.raises(FileNotFoundError):
        ConfigLoader.from_yaml(tmp_path / "missing.yml")


def test_config_loader_from_env_reads_wordmatch_variables() -> None:
    """Environment loader should normalize format and boolean tokens."""

    config = ConfigLoader.from_env(
        {
            "WORDMATCH_OUTPUT_FORMAT": " Json ",
            "WORDMATCH_BUILTIN_CONFUSABLES": "yes",
            "WORDMATCH_DECOMPOSE": "off",
            "UNRELATED": "ignored",
        }
    )

    assert config.output_format == "json"
    assert config.builtin_confusables is True
    assert config.decompose is False


def test_config_loader_from_env_defaults_and_blank_values() -> None:
    """Blank or missing variables should fall back to defaults."""

    config = ConfigLoader.from_env({"WORDMATCH_DECOMPOSE": "  "})

    assert config == WordmatchConfig()


def test_config_loader_from_env_rejects_invalid_boolean() -> None:
    """Invalid boolean tokens should name the offending variable."""

    with pytest.raises(ValueError, match="WORDMATCH_BUILTIN_CONFUSABLES"):
        ConfigLoader.from_env({"WORDMATCH_BUILTIN_CONFUSABLES": "sometimes"})


def test_config_build_table_without_builtin_uses_only_extra_mappings() -> None:
    """Disabling the built-in table should leave only configured mappings."""

    config = WordmatchConfig(builtin_confusables=False, confusables={"$": "s"})

    table = config.build_table()

    assert len(table) == 1
    assert table.replace("$ä0") == "sa0"


def test_config_build_table_without_decomposition_keeps_builtin_entries() -> None:
    """Turning decomposition off should still apply explicit built-in lookalikes."""

    config = WordmatchConfig(decompose=False)

    table = config.build_table()

    assert table.decompose is False
    assert table.replace("а0𝕙") == "ao𝕙"


def test_config_build_normalizer_lowercases_configured_replacements() -> None:
    """Normalizers built from config should apply extra mappings then lowercase."""

    normalizer = WordmatchConfig(confusables={"@": "A"}).build_normalizer()

    assert normalizer.normalize("C@T") == "cat"


def test_config_loader_from_env_applies_format_override_before_validation() -> None:
    """An explicit format should replace an invalid environment format."""

    config = ConfigLoader.from_env({"WORDMATCH_OUTPUT_FORMAT": "xml"}, output_format="json")

    assert config.output_format == "json"


def test_config_loader_from_yaml_applies_format_override_before_validation(
    write_config: Callable[[str], Path],
) -> None:
    """An explicit format should replace an invalid file format."""

    config = ConfigLoader.from_yaml(write_config("output_format: xml"), output_format="text")

    assert config.output_format == "text"
