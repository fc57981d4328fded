"""Logging setup for the command line front end."""
import logging
import sys
from typing import Optional, TextIO

from crc_prefixer.config import PrefixerConfig


def setup_logging(config: PrefixerConfig, stream: Optional[TextIO] = None) -> None:
    """
    Configures the root logger from config. Existing handlers are removed so
    repeated calls do not duplicate output.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(config.log_format))
    root_logger.addHandler(handler)
    root_logger.setLevel(config.numeric_log_level)
