"""Logging configuration for git-branch-health"""
import copy
import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_LOG_FILE = Path.home() / '.git-branch-health' / 'git-branch-health.log'

# GitPython logs every subprocess and PyGithub every request at DEBUG
NOISY_LOGGERS = ('git.cmd', 'git.util', 'github', 'urllib3')


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when stderr is a terminal."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color is None or not sys.stderr.isatty():
            return super().format(record)
        # Other handlers share the record; color a copy only
        record = copy.copy(record)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(verbose: bool = False, debug: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure logging for the application.

    WARNING by default, INFO with verbose, DEBUG with debug. Debug runs are
    also written to log_file (default ~/.git-branch-health/git-branch-health.log),
    and only then do library loggers get through below WARNING.

    Args:
        verbose: Show INFO messages
        debug: Show DEBUG messages with timestamps and keep a log file
        log_file: Where debug runs are logged
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    detailed_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    if debug:
        log_path = Path(log_file) if log_file else DEFAULT_LOG_FILE
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=detailed_format, datefmt=date_format))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    if debug:
        console_handler.setFormatter(ColoredFormatter(fmt=detailed_format, datefmt=date_format))
    else:
        console_handler.setFormatter(ColoredFormatter(fmt='[%(name)s] %(message)s'))
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module, named without the package prefix.

    "git_branch_health.services.git.gateway" logs as "git.gateway".

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    name = name.removeprefix('git_branch_health.')
    name = name.removeprefix('services.')
    return logging.getLogger(name)
