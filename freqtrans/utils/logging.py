"""
Logging utilities for the benchmark and plotting scripts.

Library code only calls ``logging.getLogger(__name__)``; handlers are set up
here, by the scripts that need them.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


def setup_logging(
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    format_string: str = None,
    name: str = None
) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        log_file: Path to log file (if None, only console output)
        level: Logging level for the file handler
        format_string: Custom format string
        name: Logger name (if None, uses root logger)

    Returns:
        Configured logger
    """
    formatter = logging.Formatter(format_string or LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []

    # Console gets warnings only; rich handles the normal display
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


class BenchmarkLogger:
    """
    Writes a timestamped log file for one benchmark run.
    """

    def __init__(self, run_name: str, log_dir: str = 'logs'):
        self.run_name = run_name
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        self.log_file = self.log_dir / f'{run_name}_{timestamp}.log'
        self.logger = setup_logging(log_file=str(self.log_file), level=logging.DEBUG, name=run_name)

    def info(self, msg: str):
        self.logger.info(msg)

    def warning(self, msg: str):
        self.logger.warning(msg)

    def log_config(self, config: dict):
        """Log benchmark configuration."""
        self.logger.info("=" * 60)
        self.logger.info("BENCHMARK CONFIGURATION")
        self.logger.info("=" * 60)
        for key, value in config.items():
            self.logger.info(f"  {key}: {value}")
        self.logger.info("=" * 60)

    def log_result(self, kind: str, shape: tuple, time_ms: float, max_error: float, passed: bool):
        """Log one timing/accuracy measurement."""
        status = "ok" if passed else "FAILED"
        self.logger.info(
            f"{kind} {shape}: {time_ms:.4f} ms, max_error={max_error:.2e} [{status}]"
        )
        if not passed:
            self.logger.warning(f"{kind} {shape} exceeds tolerance: max_error={max_error:.2e}")
