"""Shared utilities for the struct generator."""

from .config import (
    GeneratorConfig,
    load_config,
    load_config_file,
    DEFAULT_CONNECTION_STRING,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PACKAGE_NAME,
    DEFAULT_FILE_SUFFIX,
)
from .naming import (
    clean_name,
    to_go_exported,
)
from .errors import (
    CodegenError,
    ConnectivityError,
    OutputError,
    ConfigError,
)

__all__ = [
    # Configuration
    "GeneratorConfig",
    "load_config",
    "load_config_file",
    "DEFAULT_CONNECTION_STRING",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_PACKAGE_NAME",
    "DEFAULT_FILE_SUFFIX",
    # Naming utilities
    "clean_name",
    "to_go_exported",
    # Errors
    "CodegenError",
    "ConnectivityError",
    "OutputError",
    "ConfigError",
]
