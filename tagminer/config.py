import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

_ENV_VARS = {
    "TAGMINER_ENV": "environment",
    "PORT": "port",
    "TAGMINER_DATA_DIR": "data_dir",
    "TAGMINER_TAGS_FILE": "tags_file",
}


@dataclass
class Settings:
    data_dir: Path = Path("data")
    tags_file: Path = Path("tags.txt")
    extension: str = "json"
    separator: str = "\n"
    html_separator: str = "<br/>"
    strict: bool = False
    sort_files: bool = False
    workers: int = 4
    host: str = "127.0.0.1"
    port: int = 9000
    environment: str = "development"

    def __post_init__(self):
        self.data_dir = Path(self.data_dir)
        self.tags_file = Path(self.tags_file)
        self.port = int(self.port)
        self.workers = int(self.workers)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def _check_keys(values: Dict[str, Any], origin: str) -> None:
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown settings in {origin}: {', '.join(unknown)}")


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    section = data.get("tagminer") if "tagminer" in data else data
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"The tagminer section of {path} must be a mapping")
    return section


def _read_env(environ) -> Dict[str, Any]:
    return {key: environ[var] for var, key in _ENV_VARS.items() if environ.get(var)}


def load_settings(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
    environ=None,
) -> Settings:
    """
    Build Settings from defaults, an optional YAML file, the environment and
    explicit overrides, later sources winning. ``None`` overrides are ignored.
    """
    environ = os.environ if environ is None else environ
    values: Dict[str, Any] = {}

    if path is not None:
        file_values = _read_yaml(Path(path))
        _check_keys(file_values, str(path))
        values.update(file_values)
        logger.debug(f"Loaded settings from {path}")

    values.update(_read_env(environ))

    explicit = {k: v for k, v in (overrides or {}).items() if v is not None}
    _check_keys(explicit, "overrides")
    values.update(explicit)

    return replace(Settings(), **values)
