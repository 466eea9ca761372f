"""Configuration model and loaders for wordmatch.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Load configuration from YAML files and environment variables.
- Build the confusable table and normalizer a configuration describes.

Key types:
- `WordmatchConfig`: normalized settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `WordmatchConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_permissive_boolean
from .text.confusables import DEFAULT_CONFUSABLES, ConfusableTable
from .text.normalizer import TextNormalizer

OUTPUT_FORMATS = ("text", "json")
_DEFAULT_OUTPUT_FORMAT = "text"


@dataclass(slots=True)
class WordmatchConfig:
    """Runtime configuration for normalization and scanning commands.

    Attributes:
        output_format: Rendering format for command output, `text` or `json`.
        builtin_confusables: Whether the built-in confusable table is the base table.
        decompose: Whether unmapped characters are folded by compatibility decomposition.
        confusables: Extra single-character mappings layered over the base table.
    """

    output_format: str = _DEFAULT_OUTPUT_FORMAT
    builtin_confusables: bool = True
    decompose: bool = True
    confusables: dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Validate configuration values before building collaborators."""

        if self.output_format not in OUTPUT_FORMATS:
            choices = ", ".join(OUTPUT_FORMATS)
            raise ValueError(f"`output_format` must be one of: {choices}.")
        self.build_table()

    def build_table(self) -> ConfusableTable:
        """Return the confusable table described by this configuration."""

        if not self.builtin_confusables:
            base = ConfusableTable(decompose=self.decompose)
        elif self.decompose == DEFAULT_CONFUSABLES.decompose:
            base = DEFAULT_CONFUSABLES
        else:
            base = ConfusableTable(DEFAULT_CONFUSABLES.explicit, decompose=self.decompose)
        if not self.confusables:
            return base
        return base.extended(self.confusables)

    def build_normalizer(self) -> TextNormalizer:
        """Return a normalizer backed by this configuration's table."""

        return TextNormalizer(self.build_table().replace)


class ConfigLoader:
    """Factory methods for creating `WordmatchConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {"output_format", "builtin_confusables", "decompose", "confusables"}
    )

    @staticmethod
    def from_yaml(path: Path, *, output_format: str | None = None) -> WordmatchConfig:
        """Create a validated config from a YAML file.

        Args:
            path: YAML file to read.
            output_format: Explicit format that replaces the file value before validation.
        """

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(
            payload, source_label=f"YAML `{path}`", output_format=output_format
        )

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None, *, output_format: str | None = None
    ) -> WordmatchConfig:
        """Create a validated config from `WORDMATCH_*` environment variables.

        An explicit `output_format` replaces `WORDMATCH_OUTPUT_FORMAT` before validation.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env
        output_format = normalize_optional_string(output_format) or normalize_optional_string(
            env_map.get("WORDMATCH_OUTPUT_FORMAT")
        )
        config = WordmatchConfig(
            output_format=(output_format or _DEFAULT_OUTPUT_FORMAT).lower(),
            builtin_confusables=ConfigLoader._env_boolean(
                env_map, "WORDMATCH_BUILTIN_CONFUSABLES", default=True
            ),
            decompose=ConfigLoader._env_boolean(env_map, "WORDMATCH_DECOMPOSE", default=True),
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str, output_format: str | None = None
    ) -> WordmatchConfig:
        """Build a validated config from a parsed mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        output_format = normalize_optional_string(output_format) or normalize_optional_string(
            payload.get("output_format")
        )
        config = WordmatchConfig(
            output_format=(output_format or _DEFAULT_OUTPUT_FORMAT).lower(),
            builtin_confusables=ConfigLoader._boolean(
                payload, "builtin_confusables", source_label, default=True
            ),
            decompose=ConfigLoader._boolean(payload, "decompose", source_label, default=True),
            confusables=ConfigLoader._confusable_map(payload, "confusables", source_label),
        )
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

    @staticmethod
    def _boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default
        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _confusable_map(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> dict[str, str]:
        """Read an optional mapping of single characters to replacements.

        Keys and values are kept verbatim since whitespace can be a valid confusable.
        """

        raw = payload.get(key)
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        mapping: dict[str, str] = {}
        for raw_key, raw_value in raw.items():
            if not isinstance(raw_key, str) or len(raw_key) != 1:
                raise ValueError(
                    f"{source_label} field `{key}` key {raw_key!r} must be one character."
                )
            if not isinstance(raw_value, str) or not raw_value:
                raise ValueError(
                    f"{source_label} field `{key}` has blank value for {raw_key!r}."
                )
            mapping[raw_key] = raw_value
        return mapping

    @staticmethod
    def _env_boolean(env: Mapping[str, str], key: str, default: bool) -> bool:
        """Read an optional boolean from an environment mapping."""

        if normalize_optional_string(env.get(key)) is None:
            return default
        parsed = parse_permissive_boolean(env[key])
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
