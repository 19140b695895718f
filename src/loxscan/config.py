"""
Scanner Configuration
=====================

Settings for the loxscan command-line driver. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)

Environment variables (all optional):
    LOXSCAN_MAX_ERRORS: Stop after this many errors (integer, 0 = no limit)
    LOXSCAN_LOG_LEVEL: DEBUG, INFO, WARNING or ERROR
    LOXSCAN_FORMAT: Token output format, "text" or "json"
    LOXSCAN_PROMPT: Prompt string for interactive mode
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import os


OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class ScanConfig:
    """
    Configuration for a loxscan run.

    Attributes:
        max_errors: Errors to report before giving up (0 means no limit)
        log_level: Logging level name for the loxscan loggers
        output_format: How tokens are printed, "text" or "json"
        prompt: Prompt shown in interactive mode
    """
    max_errors: int = 0
    log_level: str = "WARNING"
    output_format: str = "text"
    prompt: str = "> "

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScanConfig":
        """
        Create a ScanConfig from environment variables.

        Invalid values are ignored and the default kept.

        Args:
            environ: Mapping to read instead of os.environ (for tests)

        Returns:
            ScanConfig with values from the environment
        """
        if environ is None:
            environ = os.environ

        config = cls()

        if max_errors := environ.get("LOXSCAN_MAX_ERRORS"):
            try:
                value = int(max_errors)
            except ValueError:
                value = -1
            if value >= 0:
                config.max_errors = value

        if log_level := environ.get("LOXSCAN_LOG_LEVEL"):
            if log_level.upper() in LOG_LEVELS:
                config.log_level = log_level.upper()

        if output_format := environ.get("LOXSCAN_FORMAT"):
            if output_format.lower() in OUTPUT_FORMATS:
                config.output_format = output_format.lower()

        if prompt := environ.get("LOXSCAN_PROMPT"):
            config.prompt = prompt

        return config
