# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Ordrec Contributors
#
# This file is part of Ordrec.
#
# Ordrec is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Ordrec is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from ordrec.records.errors import OrderRecordConfigError
from ordrec.records.store import DEFAULT_FILE_NAME

CONFIG_FILE_NAMES = ("ordrec.yaml", "ordrec.yml", "ordrec.json")

SUPPORTED_BACKENDS = ("xml",)


@dataclass(frozen=True)
class StoreConfig:
    data_file: Path = Path(DEFAULT_FILE_NAME)
    backend: str = "xml"
    atomic_write: bool = True
    create_if_missing: bool = False  # Treat a missing data file as an empty store


def default_config_file(directory: str | Path) -> Path | None:
    p = Path(directory)
    for name in CONFIG_FILE_NAMES:
        candidate = p / name
        if candidate.exists():
            return candidate
    return None


def _read_config_file(path: Path) -> Any:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise OrderRecordConfigError(f"Cannot read config file {path}: {e}", details={"path": str(path)}) from e

    try:
        if path.suffix.lower() == ".json":
            return json.loads(raw)
        return yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise OrderRecordConfigError(f"Invalid config file {path}: {e}", details={"path": str(path)}) from e


def config_from_mapping(data: Mapping[str, Any], *, base_dir: Path | None = None) -> StoreConfig:
    """
    Build a StoreConfig from a plain mapping.

    Relative ``data_file`` values are resolved against ``base_dir`` when given.
    Unknown keys are rejected so typos do not silently fall back to defaults.
    """
    known = {f.name for f in fields(StoreConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise OrderRecordConfigError(
            f"Unknown config key(s): {', '.join(unknown)}",
            details={"supported": sorted(known)},
        )

    defaults = StoreConfig()

    data_file = data.get("data_file", defaults.data_file)
    if not isinstance(data_file, (str, Path)) or not str(data_file).strip():
        raise OrderRecordConfigError("'data_file' must be a non-empty path string.")
    data_file = Path(data_file)
    if base_dir is not None and not data_file.is_absolute():
        data_file = base_dir / data_file

    backend = data.get("backend", defaults.backend)
    if not isinstance(backend, str):
        raise OrderRecordConfigError("'backend' must be a string.")
    backend = backend.strip().lower()
    if backend not in SUPPORTED_BACKENDS:
        raise OrderRecordConfigError(
            f"Unsupported backend: {backend!r}",
            details={"supported": list(SUPPORTED_BACKENDS)},
        )

    flags: dict[str, bool] = {}
    for key in ("atomic_write", "create_if_missing"):
        value = data.get(key, getattr(defaults, key))
        if not isinstance(value, bool):
            raise OrderRecordConfigError(f"'{key}' must be a boolean.")
        flags[key] = value

    return StoreConfig(data_file=data_file, backend=backend, **flags)


def load_config(path: str | Path | None = None, *, search_dir: str | Path = ".") -> StoreConfig:
    """
    Load store configuration.

    With an explicit ``path`` the file must exist. Otherwise ``search_dir`` is
    searched for ordrec.yaml / ordrec.yml / ordrec.json and defaults are used
    when none is present.
    """
    if path is None:
        found = default_config_file(search_dir)
        if found is None:
            return StoreConfig()
        path = found

    path = Path(path)
    if not path.exists():
        raise OrderRecordConfigError(f"Config file does not exist: {path}", details={"path": str(path)})

    data = _read_config_file(path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise OrderRecordConfigError("Config root must be a mapping/object.", details={"path": str(path)})

    return config_from_mapping(data, base_dir=path.parent)
