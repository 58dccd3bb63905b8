"""
Config command for the extents CLI.

Usage:
    extents config --show          Show effective configuration with sources
    extents config --init          Create template config file
    extents config --paths         Show config file locations
"""

import sys
from pathlib import Path

from extents.config import (
    CONFIG_FILENAMES,
    USER_CONFIG_PATH,
    Config,
    generate_template,
    get_config_paths,
)


def run(args) -> int:
    """Handle the config subcommand."""
    if args.init:
        return _init_config(args.user)
    elif args.paths:
        return _show_paths()
    # Default to showing config
    return _show_config()


def _show_config() -> int:
    """Show effective configuration with sources."""
    config = Config.load()

    print("# Effective extents configuration")
    print()

    print("[defaults]")
    _print_value("format", config.defaults.format, config.get_source("defaults.format"))
    _print_value("strict", config.defaults.strict, config.get_source("defaults.strict"))
    _print_value("verbose", config.defaults.verbose, config.get_source("defaults.verbose"))
    print()

    print("[display]")
    _print_value("precision", config.display.precision, config.get_source("display.precision"))

    return 0


def _print_value(key: str, value, source: str) -> None:
    """Print a config value with its source."""
    if isinstance(value, str):
        formatted = f'"{value}"'
    elif isinstance(value, bool):
        formatted = "true" if value else "false"
    elif value is None:
        formatted = "# not set"
    else:
        formatted = str(value)

    if source != "default":
        # Show just filename for brevity
        source_display = Path(source).name
    else:
        source_display = source

    print(f"{key} = {formatted}  # from: {source_display}")


def _show_paths() -> int:
    """Show config file paths."""
    paths = get_config_paths()

    print("Config file paths:")
    print()

    print(f"User config: {USER_CONFIG_PATH}")
    if paths["user"]:
        print("  Status: exists")
    else:
        print("  Status: not found")
    print()

    print(f"Project config search: {', '.join(CONFIG_FILENAMES)}")
    if paths["project"]:
        print(f"  Found: {paths['project']}")
    else:
        print("  Status: not found")

    return 0


def _init_config(user: bool = False) -> int:
    """Create a template config file."""
    if user:
        target = USER_CONFIG_PATH
        target.parent.mkdir(parents=True, exist_ok=True)
    else:
        target = Path.cwd() / CONFIG_FILENAMES[0]  # .extents.toml

    if target.exists():
        print(f"Error: Config file already exists: {target}", file=sys.stderr)
        print("Remove it first or edit manually.", file=sys.stderr)
        return 1

    try:
        target.write_text(generate_template())
        print(f"Created config template: {target}")
        print()
        print("Uncomment and modify values as needed.")
        return 0
    except OSError as e:
        print(f"Error writing config file: {e}", file=sys.stderr)
        return 1
