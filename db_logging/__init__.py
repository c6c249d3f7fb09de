"""
Logging module
"""

from .logger import DatabaseLogger, LogLevel
from .log_manager import LogManager

__all__ = ["DatabaseLogger", "LogLevel", "LogManager"]
