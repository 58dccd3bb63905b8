"""
Configuration file support for the extents command line tool.

Provides hierarchical configuration loading from:
1. Project config: .extents.toml or extents.toml in project root
2. User config: ~/.config/extents/config.toml

CLI arguments override config file values, and project config overrides user config.
"""

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

# Config file names to search for in project directories
CONFIG_FILENAMES = [".extents.toml", "extents.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "extents" / "config.toml"

OUTPUT_FORMATS = ("table", "json")

# All known config keys for validation
KNOWN_KEYS = {
    "defaults": {"format", "strict", "verbose"},
    "display": {"precision"},
}


@dataclass
class DefaultsConfig:
    """Default options for CLI commands."""

    format: str = "table"
    strict: bool = False
    verbose: bool = False


@dataclass
class DisplayConfig:
    """Table output settings."""

    precision: int = 6


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    # Track which file each setting came from (for --show)
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            user_data = _load_toml_file(USER_CONFIG_PATH)
            if user_data:
                _merge_config(config, user_data, str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            project_data = _load_toml_file(project_config)
            if project_data:
                _merge_config(config, project_data, str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")


class ConfigError(Exception):
    """Configuration-related errors."""

    pass


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any] | None:
    """
    Load a TOML file safely.

    Args:
        path: Path to TOML file

    Returns:
        Parsed TOML data or None if no TOML parser is available

    Raises:
        ConfigError: If TOML is invalid or unreadable
    """
    if tomllib is None:
        warnings.warn(
            "tomli package not installed. Config file support requires 'pip install tomli' for Python < 3.11.",
            stacklevel=2,
        )
        return None

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info

    Raises:
        ConfigError: If a value has the wrong type
    """
    # Warn about unknown top-level keys
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    if "defaults" in data:
        defaults_data = data["defaults"]
        _warn_unknown_keys(defaults_data, KNOWN_KEYS["defaults"], "defaults", source)

        if "format" in defaults_data:
            value = defaults_data["format"]
            if value not in OUTPUT_FORMATS:
                raise ConfigError(
                    f"Invalid defaults.format '{value}' in {source}; "
                    f"expected one of: {', '.join(OUTPUT_FORMATS)}"
                )
            config.defaults.format = value
            sources["defaults.format"] = source
        if "strict" in defaults_data:
            config.defaults.strict = _expect_bool(defaults_data["strict"], "defaults.strict", source)
            sources["defaults.strict"] = source
        if "verbose" in defaults_data:
            config.defaults.verbose = _expect_bool(
                defaults_data["verbose"], "defaults.verbose", source
            )
            sources["defaults.verbose"] = source

    if "display" in data:
        display_data = data["display"]
        _warn_unknown_keys(display_data, KNOWN_KEYS["display"], "display", source)

        if "precision" in display_data:
            value = display_data["precision"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(
                    f"Invalid display.precision {value!r} in {source}; expected a positive integer"
                )
            config.display.precision = value
            sources["display.precision"] = source


def _expect_bool(value: Any, key: str, source: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"Invalid {key} {value!r} in {source}; expected true or false")
    return value


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# extents configuration file
# Place as .extents.toml in project root or ~/.config/extents/config.toml for user defaults

[defaults]
# Output format: table, json
# format = "table"

# Treat dimensions missing from either operand as voiding the result
# strict = false

# Enable debug logging by default
# verbose = false

[display]
# Significant digits for bounds in table output
# precision = 6
"""


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
