from __future__ import annotations

"""
Platform Configuration Validation Service.

Turns untrusted configuration data (JSON files, CLI input) into a
PlatformConfig. Missing keys are taken from a preset, mistyped values are
coerced with warnings, and strict mode raises instead of coercing.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from pathinfo.domain.platform import PRESETS, PlatformConfig

logger = logging.getLogger(__name__)

DEFAULT_PRESET = "host"


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_platform_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[PlatformConfig, List[str]]:
    """
    Validate and normalize a raw platform configuration dictionary.

    The optional 'preset' key ('windows', 'posix' or 'host') selects the
    configuration that supplies every key the dictionary leaves out.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on bad values instead of coercing.

    Returns:
        Tuple[PlatformConfig, List[str]]: The resulting configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []

    # 1. Base Type Validation
    if config is None:
        config = {}
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return PRESETS[DEFAULT_PRESET](), warnings

    # 2. Preset Selection
    preset_name = _as_str(config.get("preset"), DEFAULT_PRESET, "preset", warnings, strict).lower()
    if preset_name not in PRESETS:
        msg = f"Unknown preset '{preset_name}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{DEFAULT_PRESET}'.")
        preset_name = DEFAULT_PRESET
    base = PRESETS[preset_name]()

    # 3. Field Processing & Normalization
    std = _as_char(config.get("standard_separator"), base.standard_separator,
                   "standard_separator", warnings, strict)
    alt = _as_char(config.get("alternate_separator"), base.alternate_separator,
                   "alternate_separator", warnings, strict)
    anchor_char = _as_char(config.get("relative_anchor_char"), base.relative_anchor_char,
                           "relative_anchor_char", warnings, strict)

    if "volume_separator" in config:
        volume_sep = _as_optional_str(config.get("volume_separator"), "volume_separator", warnings, strict)
    else:
        volume_sep = base.volume_separator

    invalid_path = _as_char_set(config.get("invalid_path_chars"), base.invalid_path_chars,
                                "invalid_path_chars", warnings, strict)
    invalid_filename = _as_char_set(config.get("invalid_filename_chars"), base.invalid_filename_chars,
                                    "invalid_filename_chars", warnings, strict)

    if "valid_volume_labels" in config:
        labels = _as_label_set(config.get("valid_volume_labels"), "valid_volume_labels", warnings, strict)
    else:
        labels = base.valid_volume_labels

    limits: Dict[str, Optional[int]] = {}
    for field in ("max_file_path_length", "max_directory_path_length", "max_component_length"):
        if field in config:
            limits[field] = _as_optional_positive_int(config.get(field), field, warnings, strict)
        else:
            limits[field] = getattr(base, field)

    length_in_bytes = _as_bool(config.get("length_in_bytes"), base.length_in_bytes,
                               "length_in_bytes", warnings, strict)

    customized = any(key not in ("preset", "name") for key in config)
    name = _as_str(config.get("name"), "custom" if customized else base.name,
                   "name", warnings, strict)

    # 4. Domain-Specific Consistency
    invalid_path = _drop_separators(invalid_path, {std, alt}, "invalid_path_chars", warnings, strict)
    if anchor_char in (std, alt, volume_sep):
        msg = f"Relative anchor '{anchor_char}' collides with a separator."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{base.relative_anchor_char}'.")
        anchor_char = base.relative_anchor_char
    if volume_sep is not None and volume_sep in (std, alt):
        msg = f"Volume separator '{volume_sep}' collides with a directory separator."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Volumes disabled.")
        volume_sep = None

    cfg = replace(
        base,
        standard_separator=std,
        alternate_separator=alt,
        volume_separator=volume_sep,
        invalid_path_chars=invalid_path,
        invalid_filename_chars=invalid_filename,
        relative_anchor_char=anchor_char,
        valid_volume_labels=labels,
        length_in_bytes=length_in_bytes,
        name=name,
        **limits,
    )
    return cfg, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_char(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Like _as_str, but the result must be exactly one character."""
    v = _as_str(value, fallback, field, warnings, strict)
    if len(v) == 1:
        return v

    msg = f"Invalid field '{field}': expected a single character, received {v!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    """Like _as_str, but None and blank strings mean 'absent'."""
    if value is None:
        return None
    if isinstance(value, str):
        v = value.strip()
        return v or None

    msg = f"Invalid field '{field}': expected str or null, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Treated as null.")
    return None


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
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_optional_positive_int(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[int]:
    """Accept a positive integer or null (no limit)."""
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value

    if not strict and isinstance(value, str) and value.strip().isdigit() and int(value) > 0:
        warnings.append(f"Field '{field}' converted from '{value}' to int.")
        return int(value)

    msg = f"Invalid field '{field}': expected positive int or null, received {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Limit disabled.")
    return None


def _as_char_set(
        value: Any,
        fallback: FrozenSet[str],
        field: str,
        warnings: List[str],
        strict: bool,
) -> FrozenSet[str]:
    """
    Build a set of single characters.

    Accepts a list of one-character strings, or a plain string whose
    characters are taken individually.
    """
    if value is None:
        return fallback
    if isinstance(value, str):
        return frozenset(value)

    if isinstance(value, list):
        out = set()
        for i, item in enumerate(value):
            if isinstance(item, str) and len(item) == 1:
                out.add(item)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected a single character."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return frozenset(out)

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_label_set(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[FrozenSet[str]]:
    """Upper-cased volume labels, or None to accept any label."""
    if value is None:
        return None
    if isinstance(value, list):
        labels = set()
        for i, item in enumerate(value):
            if isinstance(item, str) and item.strip():
                labels.add(item.strip().upper())
            else:
                msg = f"Invalid item in '{field}[{i}]': expected a non-empty str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return frozenset(labels)

    msg = f"Invalid field '{field}': expected list[str] or null, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Label validation disabled.")
    return None


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _drop_separators(
        chars: FrozenSet[str],
        separators: set,
        field: str,
        warnings: List[str],
        strict: bool,
) -> FrozenSet[str]:
    """Separators can never be forbidden path characters."""
    clash = chars & separators
    if not clash:
        return chars
    msg = f"Field '{field}' lists directory separators {sorted(clash)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Removed.")
    return chars - clash
