"""Threshold configuration for code-smells.

Every language ships its own default thresholds. Overrides are layered,
lowest to highest priority:
    1. Global config (~/.code-smells.toml)
    2. Project config (<project>/code-smells.toml)
    3. Explicit config file (--config)
    4. Environment variables (CODE_SMELLS_* prefix)
    5. CLI overrides (passed as kwargs)

Within a config file, ``[thresholds]`` applies to every language and
``[thresholds.<language>]`` to one; the language table wins inside the same
file, and a higher layer always wins over a lower one.

Example:
    >>> config = load_config(Path("."), func_warn=20)
    >>> config.thresholds_for(LanguageType.PYTHON).func_warn
    20
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from .exceptions import ConfigurationError, InvalidConfigError, UnsupportedLanguageError
from .languages import LanguageType

CONFIG_FILE_NAME = "code-smells.toml"
GLOBAL_CONFIG_NAME = ".code-smells.toml"
ENV_PREFIX = "CODE_SMELLS_"


@dataclass(frozen=True)
class Thresholds:
    """Warning and error limits for one language.

    A value strictly greater than a limit triggers it; the error limit is
    checked first.
    """

    file_warn: int
    file_error: int
    func_warn: int
    func_error: int
    nest_warn: int
    nest_error: int

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{f.name} must be an integer")
            if value < 0:
                raise ValueError(f"{f.name} must be non-negative")

    def with_overrides(self, overrides: Mapping[str, int]) -> "Thresholds":
        """Copy with the given fields replaced; None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


THRESHOLD_FIELDS = tuple(f.name for f in fields(Thresholds))

DEFAULT_THRESHOLDS = {
    LanguageType.ELIXIR: Thresholds(
        file_warn=300, file_error=500, func_warn=30, func_error=50, nest_warn=4, nest_error=6
    ),
    LanguageType.DART: Thresholds(
        file_warn=400, file_error=600, func_warn=40, func_error=70, nest_warn=4, nest_error=6
    ),
    LanguageType.TYPESCRIPT: Thresholds(
        file_warn=250, file_error=400, func_warn=50, func_error=80, nest_warn=4, nest_error=6
    ),
    LanguageType.PYTHON: Thresholds(
        file_warn=300, file_error=500, func_warn=30, func_error=50, nest_warn=4, nest_error=6
    ),
    LanguageType.RUST: Thresholds(
        file_warn=400, file_error=600, func_warn=40, func_error=60, nest_warn=4, nest_error=6
    ),
}


@dataclass(frozen=True)
class ThresholdLayer:
    """Overrides contributed by one configuration source."""

    source: str
    shared: dict[str, int] = field(default_factory=dict)
    per_language: dict[LanguageType, dict[str, int]] = field(default_factory=dict)
    exclude: tuple[str, ...] = ()


@dataclass(frozen=True)
class SmellsConfig:
    """Resolved configuration for a run.

    Attributes:
        layers: Override layers, lowest priority first
    """

    layers: tuple[ThresholdLayer, ...] = ()

    @property
    def exclude_patterns(self) -> tuple[str, ...]:
        """Glob patterns from every layer, in layer order."""
        patterns: list[str] = []
        for layer in self.layers:
            patterns.extend(layer.exclude)
        return tuple(patterns)

    def thresholds_for(self, language: LanguageType) -> Thresholds:
        """Apply every layer to the language's defaults."""
        thresholds = DEFAULT_THRESHOLDS[language]
        for layer in self.layers:
            thresholds = thresholds.with_overrides(layer.shared)
            thresholds = thresholds.with_overrides(layer.per_language.get(language, {}))
        return thresholds


def load_config(
    project_dir: Optional[Path] = None,
    config_file: Optional[Path] = None,
    exclude: Optional[list[str]] = None,
    **overrides: Optional[int],
) -> SmellsConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        project_dir: Project root searched for code-smells.toml
        config_file: Optional explicit config file path
        exclude: Extra exclude globs from the command line
        **overrides: Threshold overrides (typically from CLI flags);
            None values are ignored

    Returns:
        Resolved SmellsConfig

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value or key is invalid
    """
    layers: list[ThresholdLayer] = []

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.is_file():
        layers.append(_layer_from_file(global_config))

    if project_dir is not None:
        project_config = project_dir / CONFIG_FILE_NAME
        if project_config.is_file():
            layers.append(_layer_from_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        layers.append(_layer_from_file(config_file))

    env_layer = _load_env_vars()
    if env_layer is not None:
        layers.append(env_layer)

    cli_shared = {k: v for k, v in overrides.items() if v is not None}
    for key, value in cli_shared.items():
        _check_threshold(key, value, "command line")
    if cli_shared or exclude:
        layers.append(
            ThresholdLayer(source="command line", shared=cli_shared, exclude=tuple(exclude or ()))
        )

    return SmellsConfig(layers=tuple(layers))


def _check_threshold(key: str, value: Any, source: str) -> int:
    if key not in THRESHOLD_FIELDS:
        raise InvalidConfigError(key, value, f"unknown threshold in {source}")
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidConfigError(key, value, f"expected an integer in {source}")
    if value < 0:
        raise InvalidConfigError(key, value, f"must be non-negative in {source}")
    return value


def _parse_threshold_table(table: Mapping[str, Any], source: str) -> dict[str, int]:
    return {key: _check_threshold(key, value, source) for key, value in table.items()}


def _layer_from_mapping(data: Mapping[str, Any], source: str) -> ThresholdLayer:
    """Validate a parsed config file.

    Raises:
        InvalidConfigError: On unknown keys, unknown languages or bad values
    """
    unknown = set(data) - {"thresholds", "exclude"}
    if unknown:
        key = sorted(unknown)[0]
        raise InvalidConfigError(key, data[key], f"unknown key in {source}")

    exclude = data.get("exclude", [])
    if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
        raise InvalidConfigError("exclude", exclude, f"expected a list of globs in {source}")

    thresholds = data.get("thresholds", {})
    if not isinstance(thresholds, dict):
        raise InvalidConfigError("thresholds", thresholds, f"expected a table in {source}")

    shared: dict[str, int] = {}
    per_language: dict[LanguageType, dict[str, int]] = {}
    for key, value in thresholds.items():
        if isinstance(value, dict):
            try:
                language = LanguageType.from_name(key)
            except UnsupportedLanguageError:
                raise InvalidConfigError(f"thresholds.{key}", value, f"unknown language in {source}")
            per_language[language] = _parse_threshold_table(value, source)
        else:
            shared[key] = _check_threshold(key, value, source)

    return ThresholdLayer(
        source=source, shared=shared, per_language=per_language, exclude=tuple(exclude)
    )


def _layer_from_file(path: Path) -> ThresholdLayer:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
    return _layer_from_mapping(data, str(path))


def _load_env_vars() -> Optional[ThresholdLayer]:
    """Load overrides from CODE_SMELLS_* environment variables.

    Supported environment variables:
        CODE_SMELLS_FILE_WARN, CODE_SMELLS_FILE_ERROR: int
        CODE_SMELLS_FUNC_WARN, CODE_SMELLS_FUNC_ERROR: int
        CODE_SMELLS_NEST_WARN, CODE_SMELLS_NEST_ERROR: int
        CODE_SMELLS_EXCLUDE: comma-separated globs

    Returns:
        A layer, or None if no variable is set
    """
    shared: dict[str, int] = {}
    for field_name in THRESHOLD_FIELDS:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            parsed = int(env_value)
        except ValueError:
            raise InvalidConfigError(env_key, env_value, "expected an integer")
        shared[field_name] = _check_threshold(field_name, parsed, "environment")

    exclude_value = os.environ.get(f"{ENV_PREFIX}EXCLUDE", "")
    exclude = tuple(p.strip() for p in exclude_value.split(",") if p.strip())

    if not shared and not exclude:
        return None
    return ThresholdLayer(source="environment", shared=shared, exclude=exclude)


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
