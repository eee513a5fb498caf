"""
Configuration management package for labtools.

This package discovers, loads and writes the YAML configuration used by the
labtools command line.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    ConfigurationError,
    load_config,
)

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'load_config',
]
