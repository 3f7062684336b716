"""
YAML → typed config loader.

Loads the progression policy from periodization.yaml (bundled with the
package) and optionally merges user overrides from
~/.liftload/periodization.yaml.

Usage:
    from liftload.core.engine.config_loader import load_periodization_config
    cfg = load_periodization_config()
    cfg.lower_body_increment  # 10 unless overridden

A missing or unparseable bundled file falls back to the PeriodizationConfig
defaults.  If the user override file exists but cannot be read or parsed, a
warning is emitted and the file is ignored.
"""

from __future__ import annotations

import importlib.resources
import os
import warnings
from pathlib import Path
from typing import Any

import yaml

from ..models import PeriodizationConfig

USER_CONFIG_DIRNAME = ".liftload"
CONFIG_FILENAME = "periodization.yaml"

# periodization keys that must be whole numbers
INTEGER_KEYS = frozenset({"target_reps"})

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path, warn: bool = False) -> dict[str, Any]:
    """Load a single YAML mapping; return {} (optionally warning) on error."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as e:
        if warn:
            warnings.warn(f"Ignoring config file {path}: {e}", stacklevel=3)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        if warn:
            warnings.warn(
                f"Ignoring config file {path}: top level must be a mapping",
                stacklevel=3,
            )
        return {}
    return data


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_bundled_yaml_path() -> Path | None:
    """Return the path to the bundled periodization.yaml, or None if not found."""
    ref = importlib.resources.files("liftload").joinpath(CONFIG_FILENAME)
    if ref.is_file():
        return Path(str(ref))
    candidate = Path(__file__).parent.parent.parent / CONFIG_FILENAME
    return candidate if candidate.exists() else None


def get_user_yaml_path() -> Path | None:
    """Return ~/.liftload/periodization.yaml if it exists, else None."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / USER_CONFIG_DIRNAME / CONFIG_FILENAME
    return p if p.exists() else None


def load_model_config(user_path: Path | None = None) -> dict[str, Any]:
    """
    Load and merge model configuration from YAML sources.

    Load order (later overrides earlier):
    1. Bundled src/liftload/periodization.yaml
    2. ``user_path`` if given, else ~/.liftload/periodization.yaml

    Returns:
        Merged dict of config sections.  Empty dict if no YAML available.
    """
    config: dict[str, Any] = {}

    bundled = get_bundled_yaml_path()
    if bundled is not None:
        config = _deep_merge(config, _load_yaml_file(bundled))

    user = user_path if user_path is not None else get_user_yaml_path()
    if user is not None:
        user_cfg = _load_yaml_file(user, warn=True)
        if user_cfg:
            config = _deep_merge(config, user_cfg)

    return config


def load_periodization_config(user_path: Path | None = None) -> PeriodizationConfig:
    """
    Build the progression policy from the merged YAML ``periodization`` section.

    Absent keys keep their PeriodizationConfig default. Values that are not
    numbers, or a target_reps that is not an integer, also keep the default
    and are reported with a warning.
    """
    section = load_model_config(user_path).get("periodization") or {}
    if not isinstance(section, dict):
        warnings.warn("'periodization' config section must be a mapping", stacklevel=2)
        return PeriodizationConfig()

    overrides: dict[str, Any] = {}
    for key, value in section.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            warnings.warn(f"Ignoring non-numeric periodization.{key}: {value!r}", stacklevel=2)
            continue
        if key in INTEGER_KEYS and not isinstance(value, int):
            warnings.warn(f"Ignoring non-integer periodization.{key}: {value!r}", stacklevel=2)
            continue
        overrides[key] = value
    return PeriodizationConfig.from_overrides(overrides)
