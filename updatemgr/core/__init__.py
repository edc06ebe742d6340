"""Core types: results, exit codes, configuration and distribution paths."""

from .config import Config, ConfigError, load_config
from .distribution import Distribution, DistributionError, detect_distribution
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    # distribution
    "Distribution",
    "DistributionError",
    "detect_distribution",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
