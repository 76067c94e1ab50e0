"""Build configuration: defaults, optional YAML file, environment toggles."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_INPUT_DIRNAME = "summaries"
DEFAULT_OUTPUT_FILE = Path("public") / "data.json"
VERBOSE_ENV = "VERBOSE"

_FALSE_VALUES = {"0", "false", "no", "off"}


def _resolve_path(raw_path: str, base_dir: Path) -> Path:
    path = Path(raw_path).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path.resolve()


@dataclass
class BuildConfig:
    """Where summaries are read from and where the aggregate is written."""

    input_dir: Path
    output_file: Path
    verbose: bool | None = None

    @classmethod
    def defaults(cls, root: Path) -> "BuildConfig":
        return cls(
            input_dir=root / DEFAULT_INPUT_DIRNAME,
            output_file=root / DEFAULT_OUTPUT_FILE,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any], root: Path, base_dir: Path) -> "BuildConfig":
        config = cls.defaults(root)
        if data.get("input_dir"):
            config.input_dir = _resolve_path(str(data["input_dir"]), base_dir)
        if data.get("output_file"):
            config.output_file = _resolve_path(str(data["output_file"]), base_dir)
        if "verbose" in data and data["verbose"] is not None:
            config.verbose = bool(data["verbose"])
        return config

    @classmethod
    def from_yaml(cls, path: Path, root: Path) -> "BuildConfig":
        config_path = path.expanduser().resolve()
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")
        return cls.from_dict(data, root, config_path.parent)


def resolve_verbose(value: bool | None) -> bool:
    if value is not None:
        return value
    env_value = os.environ.get(VERBOSE_ENV, "").strip()
    if not env_value:
        return False
    return env_value.lower() not in _FALSE_VALUES
