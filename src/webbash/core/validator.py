from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the host configuration coming from disk or CLI overrides into
strictly typed values, replacing anything unusable with the defaults and
reporting each correction as a warning.
"""

import logging
from typing import Any, Dict, List, Tuple

from webbash.domain import constants as const
from webbash.domain.config import get_default_config
from webbash.infra.logging.config import _LEVEL_MAP
from webbash.utils.i18n import SUPPORTED_LOCALES

logger = logging.getLogger(__name__)

FONT_SIZE_RANGE = (8, 32)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and the
        list of warnings produced while normalizing.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in ("user", "host"):
        merged[field] = _as_identity(merged.get(field), defaults[field], field, warnings, strict)

    merged["locale"] = _as_choice(
        merged.get("locale"), SUPPORTED_LOCALES, defaults["locale"], "locale", warnings, strict
    )
    merged["appearance_mode"] = _as_choice(
        merged.get("appearance_mode"), tuple(const.APPEARANCE_MODES),
        defaults["appearance_mode"], "appearance_mode", warnings, strict
    )
    merged["log_level"] = _as_choice(
        merged.get("log_level"), tuple(_LEVEL_MAP),
        defaults["log_level"], "log_level", warnings, strict
    )
    merged["font_size"] = _as_font_size(merged.get("font_size"), defaults["font_size"], warnings, strict)
    merged["save_log"] = _as_bool(merged.get("save_log"), defaults["save_log"], "save_log", warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, fallback: Any, warnings: List[str], strict: bool) -> Any:
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_identity(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Prompt user/host names: non-empty, no whitespace, no separator."""
    if value is None:
        return fallback
    if not isinstance(value, str):
        return _reject(
            f"Invalid field '{field}': expected str, received {type(value).__name__}.",
            fallback, warnings, strict,
        )
    v = value.strip()
    if not v or any(c.isspace() for c in v) or const.PATH_SEPARATOR in v:
        return _reject(f"Invalid field '{field}': '{value}' is not a valid name.", fallback, warnings, strict)
    return v


def _as_choice(
        value: Any,
        choices: Tuple[str, ...],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        # Level names are upper-case, every other choice is lower-case
        for candidate in (value.strip().lower(), value.strip().upper()):
            if candidate in choices:
                return candidate
    return _reject(
        f"Invalid field '{field}': expected one of {', '.join(choices)}, received {value!r}.",
        fallback, warnings, strict,
    )


def _as_font_size(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    low, high = FONT_SIZE_RANGE
    if value is None:
        return fallback
    if isinstance(value, bool):
        return _reject("Invalid field 'font_size': expected int.", fallback, warnings, strict)
    if isinstance(value, str) and value.strip().isdigit() and not strict:
        warnings.append(f"Field 'font_size' converted from '{value}' to int.")
        value = int(value.strip())
    if not isinstance(value, int):
        return _reject("Invalid field 'font_size': expected int.", fallback, warnings, strict)
    if not low <= value <= high:
        return _reject(f"Field 'font_size' out of range [{low}, {high}]: {value}.", fallback, warnings, strict)
    return value


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "sim"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "nao", "não"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    return _reject(
        f"Invalid field '{field}': expected bool, received {type(value).__name__}.",
        fallback, warnings, strict,
    )
