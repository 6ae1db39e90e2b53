"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from xmlcomment.deep_merge import deep_merge
from xmlcomment.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "code_source": {
        "root": ".",
        "encoding": "utf-8-sig",
    },
    # keyword -> url; extends and overrides the built-in C# keyword table
    "langword_urls": {},
    "xref_map": None,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration is not a mapping: {path}"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
            logger.info("Loaded configuration from %s", p)
    return config
