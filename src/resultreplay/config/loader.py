from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import ReplayOptions


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_options(path: Path | None = None, **overrides: Any) -> ReplayOptions:
    """Build replay options from an optional YAML file plus non-None overrides."""
    data: dict[str, Any] = {}
    if path is not None:
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")
        data = _load_yaml(path)
    data.update({key: value for key, value in overrides.items() if value is not None})
    return ReplayOptions.model_validate(data)
