# civicalc/config.py
"""
Engine configuration and defaults.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union


@dataclass
class AnalysisConfig:
    """Global engine configuration."""

    # Package metadata
    app_name: str = "CiviCalc"
    app_subtitle: str = "Beam Analysis Engine"
    version: str = "0.1.0"

    # Beam discretization and section defaults
    default_segments: int = 500
    default_E: float = 200e9  # Pa
    default_I: float = 1e-4  # m^4

    # Root finding
    root_tolerance: float = 1e-6
    max_iterations: int = 100
    derivative_step: float = 1e-8
    flat_derivative_limit: float = 1e-15

    # Reporting
    report_decimals: int = 4
    full_span_tolerance: float = 1e-9

    log_format: str = (
        "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
        "- %(message)s"
    )
    log_datefmt: str = "%H:%M:%S"


# Global config instance
CONFIG = AnalysisConfig()


def configure_logging(level: Union[int, str] = logging.INFO,
                      config: Optional[AnalysisConfig] = None) -> logging.Logger:
    """
    Attach a single stream handler to the ``civicalc`` logger.

    Library modules only create loggers; applications call this once.
    """
    config = config or CONFIG
    logger = logging.getLogger("civicalc")
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(fmt=config.log_format, datefmt=config.log_datefmt)
        )
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
