# services/excerpts/config_loader.py
"""
Loads the excerpt plugin configuration from ``configs/excerpts.yaml`` (or any
other YAML file) and validates it with the Pydantic models in
``models.excerpt_config``.  The file can contain a top‑level
``excerpts_plugin`` key or just the ``sources`` / ``sourceSets`` /
``excerpts`` mapping.

Public API:
* ``load_plugin_configuration(path)`` – read + validate a YAML file.
* ``parse_plugin_configuration(raw)`` – validate an already loaded mapping.

Nothing is cached at module level: callers load the configuration once at
startup and hand the resulting object to ``ExcerptResolver``.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger

from core.config import get_settings
from models.excerpt_config import PluginConfiguration

WRAPPER_KEY = "excerpts_plugin"


# ----------------------------------------------------------------------
# Internal helpers
# ----------------------------------------------------------------------
def _load_yaml(path: Path) -> Dict[str, Any]:
    """Read the YAML file and return the inner plugin mapping."""
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping at the top level, got {type(raw).__name__}")
    # If the file wraps everything under ``excerpts_plugin``, return that
    # inner dict; otherwise return the whole dict.
    return raw.get(WRAPPER_KEY, raw)


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------
def parse_plugin_configuration(raw: Mapping[str, Any]) -> PluginConfiguration:
    """
    Validate ``raw`` against ``PluginConfiguration``.

    Raises
    ------
    pydantic.ValidationError
        If the mapping does not conform to the schema.
    """
    return PluginConfiguration.model_validate(dict(raw))


def load_plugin_configuration(path: Optional[Path | str] = None) -> PluginConfiguration:
    """
    Return a **validated** ``PluginConfiguration`` read from ``path``
    (defaults to ``Settings.EXCERPTS_CONFIG_PATH``).

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    pydantic.ValidationError
        If the YAML exists but does not conform to the Pydantic schema.
    """
    config_path = Path(path) if path is not None else get_settings().EXCERPTS_CONFIG_PATH
    cfg = parse_plugin_configuration(_load_yaml(config_path))
    logger.debug(
        f"Loaded excerpt configuration from {config_path}: "
        f"{len(cfg.sources)} sources, {len(cfg.source_sets)} source sets, "
        f"{len(cfg.excerpts)} excerpts"
    )
    return cfg
