"""Runtime configuration layering for the CLI.

Defaults live on ``Constants``. They are overridden, in increasing order of
precedence, by a YAML config file, ``IDE_RELEASES_*`` environment variables
and CLI flags. Bad values are logged and ignored so a typo in a config file
never breaks resolution.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

# config key -> (Constants attribute, converter)
_SETTINGS = {
    "jetbrains_ides_url": ("PRODUCTS_RELEASES_JETBRAINS_IDES_URL", str),
    "android_studio_url": ("PRODUCTS_RELEASES_ANDROID_STUDIO_URL", str),
    "cache_redirector_url": ("CACHE_REDIRECTOR_URL", str),
    "use_cache_redirector": ("USE_CACHE_REDIRECTOR", None),
    "request_timeout": ("REQUEST_TIMEOUT", int),
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def load_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """Load settings from a YAML file; a missing or invalid file yields {}."""
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load config: %s", e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: top level is not a mapping", config_path)
        return {}
    return data


def apply_settings(settings: Mapping[str, Any], *, source: str) -> None:
    """Copy recognized settings onto Constants."""
    for key, value in settings.items():
        if key not in _SETTINGS:
            logger.debug("Ignoring unknown %s setting: %s", source, key)
            continue
        if value is None:
            continue
        attr, convert = _SETTINGS[key]
        try:
            setattr(Constants, attr, _to_bool(value) if convert is None else convert(value))
        except (TypeError, ValueError) as exc:
            logger.warning("Ignoring invalid %s setting %s=%r: %s", source, key, value, exc)


def env_settings(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect ``IDE_RELEASES_<KEY>`` variables for the known settings."""
    environ = os.environ if environ is None else environ
    found = {}
    for key in _SETTINGS:
        name = Constants.ENV_PREFIX + key.upper()
        if environ.get(name):
            found[key] = environ[name]
    return found


def apply_overrides(args: Any, environ: Optional[Mapping[str, str]] = None) -> None:
    """Apply config file, environment and CLI settings in precedence order."""
    apply_settings(load_config_file(getattr(args, "CONFIG", None)), source="config file")
    apply_settings(env_settings(environ), source="environment")

    cli = {
        "jetbrains_ides_url": getattr(args, "JETBRAINS_IDES", None),
        "android_studio_url": getattr(args, "ANDROID_STUDIO", None),
    }
    if getattr(args, "NO_CACHE_REDIRECTOR", False):
        cli["use_cache_redirector"] = False
    apply_settings(cli, source="CLI")
