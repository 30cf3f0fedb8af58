"""
ihexkit Configuration
=====================

Settings for the command-line layer. The codec itself takes everything it
needs as arguments; this module only supplies defaults. Configuration can
come from:
- Default values (defined here)
- Environment variables

Environment variables (all optional):
    IHEXKIT_ENCODING: Text encoding for reading and writing files
    IHEXKIT_INFO_RECORDS: Records listed by ``ihex info`` (integer)
    IHEXKIT_VERBOSE: "1", "true" or "yes" to enable debug logging
"""

from dataclasses import dataclass
from typing import Optional
import os

from ihexkit.hexfile.fileio import DEFAULT_ENCODING


@dataclass
class CodecConfig:
    """
    Configuration for file handling and reporting.

    Attributes:
        encoding: Text encoding used for .hex files (default: "ascii")
        info_records: Records shown by the info report (default: 5)
        verbose: Enable debug logging (default: False)
    """
    encoding: str = DEFAULT_ENCODING
    info_records: int = 5
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """
        Create a CodecConfig from environment variables.

        Invalid integer values are ignored and the default is kept.
        """
        config = cls()

        if encoding := os.environ.get("IHEXKIT_ENCODING"):
            config.encoding = encoding

        if info_records := os.environ.get("IHEXKIT_INFO_RECORDS"):
            try:
                config.info_records = int(info_records)
            except ValueError:
                pass  # Ignore invalid values

        if verbose := os.environ.get("IHEXKIT_VERBOSE"):
            config.verbose = verbose.strip().lower() in ("1", "true", "yes")

        return config


# Global default configuration (can be overridden in tests)
_default_config: Optional[CodecConfig] = None


def get_default_config() -> CodecConfig:
    """
    Get the default configuration.

    Created from environment variables on first access. Can be replaced
    with set_default_config().
    """
    global _default_config
    if _default_config is None:
        _default_config = CodecConfig.from_env()
    return _default_config


def set_default_config(config: Optional[CodecConfig]) -> None:
    """Set the default configuration (None to re-read the environment)."""
    global _default_config
    _default_config = config
