"""
Configuration Management for TypeDoc MCP Server

Following Linus's principle: "Good configuration is no configuration."
Provides sensible defaults with optional environment variable overrides.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from tsdoc_index import discover_doc_path


class ServerConfig:
    """Server configuration"""

    DEFAULT_SERVER_NAME = "TypeDoc MCP Server"
    DEFAULT_LOG_LEVEL = "ERROR"  # stdout belongs to the stdio transport
    DEFAULT_README_MAX_CHARS = 500

    def __init__(self):
        self.doc_path = self._get_str_env("TSDOC_MCP_DOC_PATH")
        self.project_path = self._get_str_env("TSDOC_MCP_PROJECT_PATH")
        self.server_name = self._get_str_env("TSDOC_MCP_SERVER_NAME") or self.DEFAULT_SERVER_NAME
        self.log_level = (
            self._get_str_env("TSDOC_MCP_LOG_LEVEL") or self.DEFAULT_LOG_LEVEL
        ).upper()
        self.readme_max_chars = self._get_int_env(
            "TSDOC_MCP_README_MAX_CHARS", self.DEFAULT_README_MAX_CHARS
        )

        self._validate_config()

    def _get_str_env(self, key: str) -> Optional[str]:
        """Get stripped string from environment variable, None when unset or blank"""
        value = os.environ.get(key)
        if value is None or not value.strip():
            return None
        return value.strip()

    def _get_int_env(self, key: str, default: int) -> int:
        """Get integer from environment variable with fallback"""
        try:
            value = os.environ.get(key)
            if value is not None:
                return int(value)
        except (ValueError, TypeError):
            pass
        return default

    def _validate_config(self):
        """Validate configuration values"""
        if self.readme_max_chars <= 0:
            raise ValueError("readme_max_chars must be positive")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def get_log_level(self) -> int:
        return logging.getLevelName(self.log_level)

    def resolve_doc_path(self) -> Optional[Path]:
        """Explicit doc path wins; otherwise look for TypeDoc output in the project"""
        if self.doc_path:
            return Path(self.doc_path)
        if self.project_path:
            return discover_doc_path(self.project_path)
        return None

    def __repr__(self) -> str:
        return (
            f"ServerConfig("
            f"doc_path={self.doc_path!r}, "
            f"project_path={self.project_path!r}, "
            f"server_name={self.server_name!r}, "
            f"log_level={self.log_level!r}, "
            f"readme_max_chars={self.readme_max_chars})"
        )


# Global configuration instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get global server configuration instance"""
    global _config
    if _config is None:
        _config = ServerConfig()
    return _config


def reset_config():
    """Reset configuration (mainly for testing)"""
    global _config
    _config = None


# Environment documentation
CONFIG_DOCS = """
TypeDoc MCP Server Environment Variables:

- TSDOC_MCP_DOC_PATH: Path to the TypeDoc JSON output (typedoc --json)
- TSDOC_MCP_PROJECT_PATH: TypeScript project to search for docs/typedoc.json,
  documentation/typedoc.json or typedoc.json (used when no doc path is set)
- TSDOC_MCP_SERVER_NAME: Server name reported to clients (default: "TypeDoc MCP Server")
- TSDOC_MCP_LOG_LEVEL: Logging level written to stderr (default: ERROR)
- TSDOC_MCP_README_MAX_CHARS: README excerpt length in the overview (default: 500)

Example usage:
    export TSDOC_MCP_DOC_PATH=./docs/typedoc.json
    export TSDOC_MCP_LOG_LEVEL=INFO
"""
