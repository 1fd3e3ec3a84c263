"""
Logging utilities.

Diagnostics go to stderr so that stdout carries only the score line.
"""

import sys
import logging
from pathlib import Path
from typing import Optional, TextIO


ROOT_LOGGER = "coexbench"


def setup_logger(
    name: str = ROOT_LOGGER,
    log_file: Optional[str] = None,
    level: str = "INFO",
    format_str: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Set up a logger with console and optional file handlers.
    
    Parameters
    ----------
    name : str
        Logger name.
    log_file : str, optional
        Path to log file.
    level : str
        Logging level (DEBUG, INFO, WARNING, ERROR).
    format_str : str, optional
        Log message format.
    stream : file-like, optional
        Console stream, stderr by default.
        
    Returns
    -------
    logging.Logger
        Configured logger.
    """
    if format_str is None:
        format_str = "[%(levelname)s] %(name)s: %(message)s"
    
    # Create logger
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    
    # Clear existing handlers
    logger.handlers = []
    
    # Create formatter
    formatter = logging.Formatter(format_str)
    
    # Console handler
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    # File handler (optional)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Get a logger under the package root logger.
    
    Parameters
    ----------
    name : str
        Logger name, e.g. "pathways" for ``coexbench.pathways``.
        
    Returns
    -------
    logging.Logger
        Logger instance.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)

