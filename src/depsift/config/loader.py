# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete rc file formats (JSON, TOML, Python modules)."""

from __future__ import annotations

import json
import logging
import runpy
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from types import ModuleType
from typing import Any, Final

from ..options import OPTIONS_BY_NAME, canonical_option_key
from .errors import ConfigParseError
from .layers import RC_LAYER, ConfigLayer

LOGGER = logging.getLogger(__name__)

MODULE_EXPORT_NAME: Final[str] = "config"
_MODULE_RUN_NAME: Final[str] = "__depsift_config__"

DocumentReader = Callable[[Path], Mapping[str, Any]]


def _read_json(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(path, f"unable to read file ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise ConfigParseError(path, f"malformed JSON ({exc})") from exc
    if not isinstance(data, Mapping):
        raise ConfigParseError(path, "top-level value must be an object")
    return data


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except OSError as exc:
        raise ConfigParseError(path, f"unable to read file ({exc})") from exc
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigParseError(path, f"malformed TOML ({exc})") from exc


def _read_module(path: Path) -> Mapping[str, Any]:
    """Execute ``path`` in a fresh namespace and return its exported options.

    The module exports either a ``config`` mapping, or module-level names that
    match recognised options (``filter = lambda name: ...``).
    """

    try:
        namespace = runpy.run_path(str(path), run_name=_MODULE_RUN_NAME)
    except Exception as exc:
        raise ConfigParseError(path, f"module raised {type(exc).__name__}: {exc}") from exc
    if MODULE_EXPORT_NAME in namespace:
        exported = namespace[MODULE_EXPORT_NAME]
        if not isinstance(exported, Mapping):
            raise ConfigParseError(path, f"'{MODULE_EXPORT_NAME}' must be a mapping")
        if not all(isinstance(key, str) for key in exported):
            raise ConfigParseError(path, f"'{MODULE_EXPORT_NAME}' keys must be strings")
        return dict(exported)
    return {
        name: value
        for name, value in namespace.items()
        if not name.startswith("_")
        and not isinstance(value, ModuleType)
        and canonical_option_key(name)[0] in OPTIONS_BY_NAME
    }


_READERS: Final[Mapping[str, DocumentReader]] = {
    ".toml": _read_toml,
    ".py": _read_module,
}


def load_config_file(path: Path) -> ConfigLayer:
    """Parse the rc file at ``path`` into a configuration layer.

    Extension-less files and any suffix other than ``.toml`` and ``.py`` are
    read as JSON.

    Args:
        path: Location of the rc file.

    Returns:
        ConfigLayer: Layer holding the file's options and ``$`` metadata.

    Raises:
        ConfigParseError: If the file cannot be read or parsed.
    """

    reader = _READERS.get(path.suffix.lower(), _read_json)
    document = reader(path)
    LOGGER.debug("loaded %d keys from %s", len(document), path)
    return ConfigLayer.from_document(RC_LAYER, document, path=path)


__all__ = ["MODULE_EXPORT_NAME", "load_config_file"]
