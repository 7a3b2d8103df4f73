"""
plclex Configuration
====================

Output settings for the plclex command. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied last by the CLI)

Environment variables (all optional):
    PLCLEX_FORMAT: Output format, "text" or "json"
    PLCLEX_LOCATIONS: Show line:column for each token (1/true/yes/on)
    PLCLEX_VERBOSE: Enable debug logging and summaries (1/true/yes/on)
"""

from dataclasses import dataclass
import os

OUTPUT_FORMATS = ("text", "json")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_flag(value: str) -> bool | None:
    """Interpret an environment flag; None if the value is not recognised."""
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


@dataclass
class LexConfig:
    """
    Configuration for a plclex run.

    Attributes:
        output_format: "text" (one token per line) or "json"
        show_locations: Include line and column for each token
        verbose: Debug logging plus a token count summary
    """

    output_format: str = "text"
    show_locations: bool = False
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "LexConfig":
        """
        Create LexConfig from environment variables.

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if output_format := os.environ.get("PLCLEX_FORMAT"):
            output_format = output_format.strip().lower()
            if output_format in OUTPUT_FORMATS:
                config.output_format = output_format

        if locations := os.environ.get("PLCLEX_LOCATIONS"):
            flag = _parse_flag(locations)
            if flag is not None:
                config.show_locations = flag

        if verbose := os.environ.get("PLCLEX_VERBOSE"):
            flag = _parse_flag(verbose)
            if flag is not None:
                config.verbose = flag

        return config
