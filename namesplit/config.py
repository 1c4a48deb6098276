"""Configuration model and loaders for namesplit.

Responsibilities:
- Define the run switches as a typed dataclass.
- Load them from a YAML file or from environment variables.

Key types:
- `SplitterConfig`: resolved switches for a command invocation.
- `ConfigLoader`: static construction helpers for `SplitterConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import SplitOptions


_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def parse_boolean(value: object, field_name: str) -> bool:
    """Parse a boolean or textual boolean token.

    Raises:
        ValueError: If the value is not one of the accepted boolean forms.
    """

    if isinstance(value, bool):
        return value
    if isinstance(value, (str, int)):
        token = str(value).strip().lower()
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


@dataclass(slots=True)
class SplitterConfig:
    """Switches for one command invocation.

    Attributes:
        deduplicate: Remove repeated names (ASCII case-insensitive).
        trim_whitespace: Normalize whitespace inside segmented chunks.
        copy_to_clipboard: Copy the joined result to the system clipboard.
    """

    deduplicate: bool = True
    trim_whitespace: bool = True
    copy_to_clipboard: bool = False

    def to_options(self) -> SplitOptions:
        """Return the pipeline-facing subset of this config."""

        return SplitOptions(
            deduplicate=self.deduplicate,
            trim_whitespace=self.trim_whitespace,
        )


class ConfigLoader:
    """Factory methods for creating `SplitterConfig` from external sources."""

    _SUPPORTED_KEYS = frozenset({"deduplicate", "trim_whitespace", "copy_to_clipboard"})
    _ENV_KEYS = {
        "deduplicate": "NAMESPLIT_DEDUPLICATE",
        "trim_whitespace": "NAMESPLIT_TRIM_WHITESPACE",
        "copy_to_clipboard": "NAMESPLIT_COPY",
    }

    @staticmethod
    def from_yaml(path: Path, defaults: SplitterConfig | None = None) -> SplitterConfig:
        """Create a config from a YAML file; missing keys keep `defaults`."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping.")

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_KEYS))
        if unknown:
            raise ValueError(
                f"YAML config `{path}` includes unsupported key(s): {', '.join(unknown)}."
            )
        return ConfigLoader._build(payload, defaults or SplitterConfig())

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SplitterConfig:
        """Create a config from `NAMESPLIT_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload = {
            key: env_map[env_key]
            for key, env_key in ConfigLoader._ENV_KEYS.items()
            if env_map.get(env_key, "").strip()
        }
        return ConfigLoader._build(payload, SplitterConfig())

    @staticmethod
    def _build(payload: Mapping[str, Any], defaults: SplitterConfig) -> SplitterConfig:
        values = {
            key: parse_boolean(payload[key], key) if key in payload else getattr(defaults, key)
            for key in ("deduplicate", "trim_whitespace", "copy_to_clipboard")
        }
        return SplitterConfig(**values)
