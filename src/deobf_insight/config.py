"""Configuration loading and management for deobf-insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in DeobfConfig)
    2. Global config (~/.deobf-insight.toml)
    3. Project config (./deobf-insight.toml)
    4. Explicit config file
    5. Environment variables (DEOBF_* prefix)
    6. Overrides (passed as kwargs)

Example:
    >>> config = load_config(mode="enhanced")
    >>> config.mode
    'enhanced'
    >>> config.naming.max_length
    64
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .classify.entropy import DEFAULT_CONFUSABLE_CHARS
from .exceptions import ConfigurationError

Verbosity = Literal["quiet", "normal", "verbose"]

MODE_NAMES = ("disabled", "conservative", "default", "enhanced", "aggressive", "auto")

DEFAULT_WHITELIST = (
    "android.support.v4.*",
    "android.support.v7.*",
    "android.support.v4.os.*",
    "android.support.annotation.Px",
    "androidx.core.os.*",
    "androidx.annotation.Px",
)


@dataclass(frozen=True)
class ClassifierConfig:
    """Thresholds for the entropy and pattern classifiers.

    Attributes:
        entropy_threshold: Entropy (bits) above which a name is random enough
            to force a rename
        entropy_min_length: Shorter names get no entropy verdict
        analyzer_confidence_threshold: Pattern confidence at which the
            analyzer counts a name as obfuscated
        analyzer_entropy_threshold: Entropy at which the analyzer counts a
            name (longer than 3 chars) as obfuscated
        confusable_chars: Glyphs that make up confusable-only names
    """

    entropy_threshold: float = 3.5
    entropy_min_length: int = 3
    analyzer_confidence_threshold: int = 50
    analyzer_entropy_threshold: float = 4.0
    confusable_chars: str = DEFAULT_CONFUSABLE_CHARS

    def __post_init__(self) -> None:
        if self.entropy_threshold < 0:
            raise ValueError("entropy_threshold must be non-negative")
        if self.analyzer_entropy_threshold < 0:
            raise ValueError("analyzer_entropy_threshold must be non-negative")
        if self.entropy_min_length < 1:
            raise ValueError("entropy_min_length must be at least 1")
        if not 0 <= self.analyzer_confidence_threshold <= 100:
            raise ValueError("analyzer_confidence_threshold must be between 0 and 100")
        if not self.confusable_chars:
            raise ValueError("confusable_chars must not be empty")


@dataclass(frozen=True)
class NamingConfig:
    """Rename thresholds and alias composition switches.

    Attributes:
        min_length: Names shorter than this are renamed by the length check
        max_length: Names longer than this are renamed; original-name hints
            longer than this are replaced by a hash fragment
        use_semantic_naming: Add singleton/builder/callback and interface tags
        use_structural_prefix: Add role and framework-base prefixes and
            method return-type hints
        use_package_hint: Keep the meaningful part of a package segment in
            semantic package aliases
        preserve_original_hint: Append the sanitized original name
        collision_suffix: Separator placed before the counter that
            deduplicates two aliases of the same kind
        whitelist: Qualified names (or ``pkg.*`` prefixes) never renamed
    """

    min_length: int = 3
    max_length: int = 64
    use_semantic_naming: bool = True
    use_structural_prefix: bool = True
    use_package_hint: bool = True
    preserve_original_hint: bool = True
    collision_suffix: str = "_"
    whitelist: list[str] = field(default_factory=lambda: list(DEFAULT_WHITELIST))

    def __post_init__(self) -> None:
        if self.min_length < 1:
            raise ValueError("min_length must be at least 1")
        if self.max_length < self.min_length:
            raise ValueError("max_length must be at least min_length")


@dataclass(frozen=True)
class DeobfConfig:
    """Top-level configuration.

    Attributes:
        mode: One of disabled, conservative, default, enhanced, aggressive, auto
        verbosity: Logging verbosity level
        classifier: Classifier thresholds
        naming: Rename thresholds and alias switches
    """

    mode: str = "default"
    verbosity: Verbosity = "normal"
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    naming: NamingConfig = field(default_factory=NamingConfig)

    def __post_init__(self) -> None:
        if self.mode.lower() not in MODE_NAMES:
            raise ValueError(f"mode must be one of {', '.join(MODE_NAMES)}")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be quiet, normal or verbose")


_NESTED_SECTIONS = {
    "classifier": ClassifierConfig,
    "naming": NamingConfig,
}


def load_config(config_file: Optional[Path] = None, **overrides) -> DeobfConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated DeobfConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
    """
    merged: dict = {}

    global_config = Path.home() / ".deobf-insight.toml"
    if global_config.exists():
        _merge(merged, _load_toml_checked(global_config, "global config"))

    project_config = Path.cwd() / "deobf-insight.toml"
    if project_config.exists():
        _merge(merged, _load_toml_checked(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _merge(merged, _load_toml_checked(config_file, "config file"))

    _merge(merged, _load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    _merge(merged, overrides)

    for section, section_cls in _NESTED_SECTIONS.items():
        value = merged.pop(section, None)
        if isinstance(value, dict):
            try:
                merged[section] = section_cls(**value)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid [{section}] config: {e}")
        elif isinstance(value, section_cls):
            merged[section] = value

    try:
        return DeobfConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _merge(target: dict, source: dict) -> None:
    """Shallow merge, except nested sections which merge key by key."""
    for key, value in source.items():
        if key in _NESTED_SECTIONS and isinstance(value, dict):
            existing = target.get(key)
            target[key] = {**existing, **value} if isinstance(existing, dict) else dict(value)
        else:
            target[key] = value


def _load_toml_checked(path: Path, label: str) -> dict:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from DEOBF_* environment variables.

    Top-level fields use ``DEOBF_<FIELD>`` (``DEOBF_MODE``); nested fields
    use ``DEOBF_<SECTION>_<FIELD>`` (``DEOBF_NAMING_MAX_LENGTH``,
    ``DEOBF_CLASSIFIER_ENTROPY_THRESHOLD``). List fields are not read from
    the environment.
    """
    result: dict[str, Any] = {}

    for field_name, value in _read_env_fields(DeobfConfig, "DEOBF_").items():
        if field_name not in _NESTED_SECTIONS:
            result[field_name] = value

    for section, section_cls in _NESTED_SECTIONS.items():
        values = _read_env_fields(section_cls, f"DEOBF_{section.upper()}_")
        if values:
            result[section] = values

    return result


def _read_env_fields(config_cls: type, prefix: str) -> dict[str, Any]:
    type_hints = get_type_hints(config_cls)
    values: dict[str, Any] = {}

    for field_name in config_cls.__dataclass_fields__:
        env_key = f"{prefix}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            values[field_name] = parsed

    return values


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot come from the environment.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
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
