#!/usr/bin/env python3
# Area: Shared
"""
rps-duel - Configuration Setup Script
=====================================

Interactive script to generate config.json and .env files.

Usage:
    python setup_config.py
"""

import json
from pathlib import Path

from rps_duel._config import ENV_MAPPINGS, validate_config
from rps_duel.errors import ConfigError


def prompt(question: str, default: str = "", required: bool = True) -> str:
    """Prompt user for input with optional default value."""
    if default:
        display = f"{question} [{default}]: "
    else:
        display = f"{question}: "

    while True:
        value = input(display).strip()
        if not value and default:
            return default
        if value:
            return value
        if not required:
            return ""
        print("  This field is required. Please enter a value.")


def print_header():
    """Print welcome header."""
    print()
    print("=" * 60)
    print("  rps-duel - Configuration Setup")
    print("=" * 60)
    print()
    print("This script will help you create config.json and .env files.")
    print("Press Enter to accept default values shown in [brackets].")
    print()


def print_section(title: str):
    """Print section header."""
    print()
    print(f"--- {title} ---")
    print()


def get_config_values() -> dict:
    """Interactively collect configuration values."""
    config = {}

    print_section("Display")
    config["move_style"] = prompt("Move style (emoji/word)", default="emoji")

    print_section("Turn Order")
    print("By default a player may still type a move out of turn.")
    print("Strict turns ignores those moves instead.")
    print()
    strict = prompt("Enforce strict turns? (y/n)", default="n")
    config["strict_turns"] = strict.lower() in ("y", "yes")

    print_section("Logging")
    config["log_level"] = prompt("Log level", default="WARNING")
    config["log_file"] = prompt("Log file (blank for none)", required=False)

    return config


def write_config_json(config: dict, path: Path) -> None:
    """Write config.json file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
    print(f"  Created: {path}")


def write_env_file(config: dict, path: Path) -> None:
    """Write .env file."""
    lines = []
    for env_key, config_key in ENV_MAPPINGS.items():
        value = config.get(config_key)
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        lines.append(f"{env_key}={value}")

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    print(f"  Created: {path}")


def main():
    """Main entry point."""
    print_header()

    try:
        config = get_config_values()
    except KeyboardInterrupt:
        print("\n\nSetup cancelled.")
        return 1

    try:
        config = validate_config(config).model_dump()
    except ConfigError as e:
        print(e.format_error_log())
        return 1

    print_section("Generating Files")

    base_path = Path.cwd()
    write_config_json(config, base_path / "config.json")
    write_env_file(config, base_path / ".env")

    print()
    print("=" * 60)
    print("  Setup Complete!")
    print("=" * 60)
    print()
    print("Next steps:")
    print()
    print("  rps-duel --config config.json")
    print()
    return 0


if __name__ == "__main__":
    exit(main())
