"""
Server configuration management.

This module handles loading and accessing server configuration from multiple sources
with a clear priority order:

    1. Environment variables (highest priority) - for containerized deployments
    2. Config file (config/server.ini) - for static deployments
    3. Built-in defaults (lowest priority) - sensible fallbacks

Configuration is loaded once at module import time and cached. The ServerConfig
dataclass provides typed access to all settings.

Usage:
    from gopher_translator.config import config

    print(config.server.port)
    print(config.history.absolute_path)

Environment Variable Mapping:
    GOPHER_HOST            -> server.host
    GOPHER_PORT            -> server.port
    GOPHER_HISTORY_PATH    -> history.path
    GOPHER_HISTORY_STRICT  -> history.strict_records
    GOPHER_LOG_LEVEL       -> logging.level
"""

import configparser
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Project root directory (contains src/, config/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "server.ini"
CONFIG_EXAMPLE = CONFIG_DIR / "server.example.ini"


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class ServerSettings:
    """Network server configuration."""

    host: str = "0.0.0.0"  # nosec B104 - intentional for server binding
    port: int = 8080


@dataclass
class HistorySettings:
    """Translation history log configuration."""

    path: str = "history.txt"
    strict_records: bool = False

    @property
    def absolute_path(self) -> Path:
        """Get absolute path to the history log.

        Relative paths resolve against the current working directory at
        call time, not at import time.
        """
        p = Path(self.path)
        if p.is_absolute():
            return p
        return Path.cwd() / p


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"
    format: Literal["simple", "detailed", "json"] = "detailed"


@dataclass
class ServerConfig:
    """
    Complete server configuration.

    Aggregates all settings sections. Access via the module-level `config`
    singleton.
    """

    server: ServerSettings = field(default_factory=ServerSettings)
    history: HistorySettings = field(default_factory=HistorySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _parse_bool(value: str) -> bool:
    """Parse a string value to boolean."""
    return value.lower() in ("true", "yes", "1", "on", "enabled")


def _load_from_ini(parser: configparser.ConfigParser, cfg: ServerConfig) -> None:
    """Load configuration from parsed INI file into ServerConfig."""
    if parser.has_section("server"):
        if parser.has_option("server", "host"):
            cfg.server.host = parser.get("server", "host")
        if parser.has_option("server", "port"):
            cfg.server.port = parser.getint("server", "port")

    if parser.has_section("history"):
        if parser.has_option("history", "path"):
            cfg.history.path = parser.get("history", "path")
        if parser.has_option("history", "strict_records"):
            cfg.history.strict_records = _parse_bool(parser.get("history", "strict_records"))

    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            cfg.logging.level = parser.get("logging", "level").upper()
        if parser.has_option("logging", "format"):
            val = parser.get("logging", "format").lower()
            if val in ("simple", "detailed", "json"):
                cfg.logging.format = val  # type: ignore[assignment]


def _apply_env_overrides(cfg: ServerConfig) -> None:
    """Apply environment variable overrides to configuration."""
    if env_host := os.getenv("GOPHER_HOST"):
        cfg.server.host = env_host
    if env_port := os.getenv("GOPHER_PORT"):
        cfg.server.port = int(env_port)

    if env_history := os.getenv("GOPHER_HISTORY_PATH"):
        cfg.history.path = env_history
    if env_strict := os.getenv("GOPHER_HISTORY_STRICT"):
        cfg.history.strict_records = _parse_bool(env_strict)

    if env_log := os.getenv("GOPHER_LOG_LEVEL"):
        cfg.logging.level = env_log.upper()


def load_config() -> ServerConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. config/server.ini
        3. config/server.example.ini (fallback for development)
        4. Built-in defaults

    Returns:
        ServerConfig: Fully populated configuration object.
    """
    cfg = ServerConfig()

    config_file = None
    if CONFIG_FILE.exists():
        config_file = CONFIG_FILE
    elif CONFIG_EXAMPLE.exists():
        config_file = CONFIG_EXAMPLE

    if config_file:
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)

    _apply_env_overrides(cfg)

    return cfg


def reload_config() -> "ServerConfig":
    """
    Reload configuration from disk and environment.

    This updates the module-level `config` singleton. An already-built
    FastAPI app keeps the history store it was created with.

    Returns:
        ServerConfig: The newly loaded configuration.
    """
    global config
    config = load_config()
    return config


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

config = load_config()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_config_status() -> dict:
    """
    Get configuration status for diagnostics.

    Returns a dictionary with configuration source information.
    """
    return {
        "config_file_exists": CONFIG_FILE.exists(),
        "config_file_path": str(CONFIG_FILE),
        "using_example": not CONFIG_FILE.exists() and CONFIG_EXAMPLE.exists(),
        "history_path": str(config.history.absolute_path),
        "history_strict_records": config.history.strict_records,
    }


def print_config_summary() -> None:
    """Print a summary of current configuration to stdout."""
    status = get_config_status()
    print("\n" + "=" * 60)
    print("SERVER CONFIGURATION")
    print("=" * 60)
    print(f"Config file: {status['config_file_path']}")
    print(f"File exists: {status['config_file_exists']}")
    if status["using_example"]:
        print("WARNING: Using example config (copy to server.ini for production)")
    print("-" * 60)
    print(f"Server:      {config.server.host}:{config.server.port}")
    print(f"History:     {status['history_path']}")
    print(f"Strict:      {status['history_strict_records']}")
    print(f"Log level:   {config.logging.level}")
    print("=" * 60 + "\n")


# =============================================================================
# TEST HELPERS
# =============================================================================


class use_test_history:
    """
    Context manager for pointing the history log at a temporary file.

    Usage:
        from gopher_translator.config import use_test_history

        def test_something(tmp_path):
            with use_test_history(tmp_path / "history.txt"):
                app = create_app()

    Args:
        history_path: Path to the temporary history file
    """

    def __init__(self, history_path: Path | str):
        self.history_path = Path(history_path)
        self.original_path: str | None = None

    def __enter__(self) -> Path:
        """Set up test history path."""
        self.original_path = config.history.path
        config.history.path = str(self.history_path)
        return self.history_path

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Restore original history path."""
        if self.original_path is not None:
            config.history.path = self.original_path
        return None
