"""
Runtime configuration for crc_prefixer.

Defaults can be overridden from the environment; command line flags take
precedence over both.
"""
import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from crc_prefixer.algorithm.prefix_solver import PrefixSolver

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "CRC_PREFIXER_LOG_LEVEL"
ENV_BASIS_METHOD = "CRC_PREFIXER_BASIS_METHOD"

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}


@dataclass(frozen=True)
class PrefixerConfig:
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT
    basis_method: str = PrefixSolver.BASIS_DIRECT

    def __post_init__(self):
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}")
        if self.basis_method not in PrefixSolver.BASIS_METHODS:
            raise ValueError(f"Unknown basis method {self.basis_method!r}")

    @property
    def numeric_log_level(self) -> int:
        return LOG_LEVELS[self.log_level.upper()]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'PrefixerConfig':
        environ = os.environ if environ is None else environ
        config = cls()
        if environ.get(ENV_LOG_LEVEL):
            config = replace(config, log_level=environ[ENV_LOG_LEVEL].upper())
            logger.debug("%s sets log level %s", ENV_LOG_LEVEL, config.log_level)
        if environ.get(ENV_BASIS_METHOD):
            config = replace(config, basis_method=environ[ENV_BASIS_METHOD].lower())
            logger.debug("%s sets basis method %s", ENV_BASIS_METHOD, config.basis_method)
        return config

    def with_overrides(self, log_level: Optional[str] = None,
                       basis_method: Optional[str] = None) -> 'PrefixerConfig':
        config = self
        if log_level:
            config = replace(config, log_level=log_level.upper())
        if basis_method:
            config = replace(config, basis_method=basis_method)
        return config

    def create_solver(self) -> PrefixSolver:
        return PrefixSolver(basis_method=self.basis_method)
