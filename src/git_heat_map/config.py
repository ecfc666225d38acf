"""Configuration loading for git heat map.

Configuration sources are merged in priority order (lowest to highest):
    1. Defaults (defined in HeatMapConfig)
    2. Global config (~/.git-heat-map.toml)
    3. Project config (./git-heat-map.toml)
    4. Explicit config file (--config)
    5. Environment variables (GIT_HEAT_MAP_* prefix)
    6. CLI overrides (passed as kwargs)

The resulting HeatMapConfig is built once at process start and handed to the
logging and presentation layers. The pipeline itself only ever sees a resolved
result limit and a styling flag.

Example:
    >>> config = load_config(log="stdout")
    >>> config.log
    'stdout'
    >>> config.default_results
    25
"""

from __future__ import annotations

import os
import tempfile
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_args, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

LogMode = Literal["off", "stdout", "log", "both"]

LOG_MODES: tuple[str, ...] = get_args(LogMode)

ENV_PREFIX = "GIT_HEAT_MAP_"

# Spellings the original LOG variable accepted for "no logging"
_LOG_OFF_ALIASES = frozenset({"false", "none", ""})


@dataclass(frozen=True)
class HeatMapConfig:
    """Runtime configuration.

    Attributes:
        use_styling: Render with rich (Markdown table, banner, prompt) when possible
        log: Where log records go: off, stdout (console), log (file) or both
        log_dir: Directory holding the log file
        log_file: Log file name
        default_results: Value offered by the interactive prompt
        exclude_deleted: Drop paths that no longer exist at HEAD
    """

    use_styling: bool = True
    log: LogMode = "off"
    log_dir: str = tempfile.gettempdir()
    log_file: str = "git_heat_map.log"
    default_results: int = 25
    exclude_deleted: bool = False

    def __post_init__(self) -> None:
        for name in ("use_styling", "exclude_deleted"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfigError(name, getattr(self, name), "expected true or false")
        # bool is an int subclass
        if isinstance(self.default_results, bool) or not isinstance(self.default_results, int):
            raise InvalidConfigError(
                "default_results", self.default_results, "expected an integer"
            )
        for name in ("log_dir", "log_file"):
            if not isinstance(getattr(self, name), str):
                raise InvalidConfigError(name, getattr(self, name), "expected a string")
        if self.log not in LOG_MODES:
            raise InvalidConfigError(
                "log", self.log, f"expected one of {', '.join(LOG_MODES)}"
            )
        if not self.log_file:
            raise InvalidConfigError("log_file", self.log_file, "must not be empty")
        if self.default_results < 1:
            raise InvalidConfigError(
                "default_results", self.default_results, "must be at least 1"
            )

    @property
    def log_path(self) -> Path:
        return Path(self.log_dir) / self.log_file

    @property
    def logs_to_console(self) -> bool:
        return self.log in ("stdout", "both")

    @property
    def logs_to_file(self) -> bool:
        return self.log in ("log", "both")


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> HeatMapConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit TOML config file
        **overrides: Direct overrides, typically from CLI flags. ``None``
            values are ignored so unset options fall through to lower layers.

    Returns:
        Validated HeatMapConfig instance

    Raises:
        ConfigurationError: If a config file is missing, unreadable or has unknown keys
        InvalidConfigError: If a value is out of range
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".git-heat-map.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "git-heat-map.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    merged.update({k: v for k, v in overrides.items() if v is not None})

    if "log" in merged:
        merged["log"] = _normalize_log_mode(merged["log"])

    try:
        return HeatMapConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _normalize_log_mode(value: Any) -> Any:
    if value is False:
        return "off"
    if isinstance(value, str):
        lower = value.strip().lower()
        return "off" if lower in _LOG_OFF_ALIASES else lower
    return value


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from GIT_HEAT_MAP_* environment variables.

    Supported environment variables:
        GIT_HEAT_MAP_USE_STYLING: bool (true/false/1/0/yes/no/on/off)
        GIT_HEAT_MAP_LOG: off/stdout/log/both (false is an alias of off)
        GIT_HEAT_MAP_LOG_DIR: str
        GIT_HEAT_MAP_LOG_FILE: str
        GIT_HEAT_MAP_DEFAULT_RESULTS: int
        GIT_HEAT_MAP_EXCLUDE_DELETED: bool

    Returns:
        Dict of field_name -> parsed_value for any GIT_HEAT_MAP_* vars found.
    """
    type_hints = get_type_hints(HeatMapConfig)

    result: dict[str, Any] = {}

    for f in fields(HeatMapConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[f.name] = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is bool:
        lower = value.strip().lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # str and Literal fields (LogMode) pass through; validated by the dataclass
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its top-level table.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
        InvalidConfigError: If a quoted value does not parse as the field's type
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    return _coerce_file_values(data)


def _coerce_file_values(data: dict[str, Any]) -> dict[str, Any]:
    """Parse quoted booleans and integers (e.g. ``use_styling = "false"``).

    Raises:
        InvalidConfigError: If a quoted value does not parse as the field's type
    """
    type_hints = get_type_hints(HeatMapConfig)

    result = dict(data)
    for key, value in data.items():
        if key not in type_hints or not isinstance(value, str):
            continue
        try:
            result[key] = _parse_env_value(value, type_hints[key])
        except ValueError as e:
            raise InvalidConfigError(key, value, str(e))
    return result
