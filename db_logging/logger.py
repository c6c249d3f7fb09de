"""
File logger
"""

import os
from datetime import datetime
from enum import Enum


class LogLevel(Enum):
    """Log levels"""

    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5


class DatabaseLogger:
    """Appends ``[time] [LEVEL] [COMPONENT] message`` lines to ``<log_dir>/<name>.log``"""

    def __init__(self, name: str, log_dir: str = "logs"):
        self.name = name
        self.log_dir = log_dir
        self.log_file = os.path.join(log_dir, f"{name}.log")
        self.min_level = LogLevel.INFO

        os.makedirs(log_dir, exist_ok=True)

        self._write_startup_info()

    def _write_startup_info(self):
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] [INFO] [SYSTEM] logger {self.name} started\n")

    def _write_log(self, level: LogLevel, message: str, component: str = "SYSTEM"):
        if level.value < self.min_level.value:
            return

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        log_line = f"[{timestamp}] [{level.name}] [{component}] {message}\n"

        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(log_line)

    def debug(self, message: str, component: str = "SYSTEM"):
        self._write_log(LogLevel.DEBUG, message, component)

    def info(self, message: str, component: str = "SYSTEM"):
        self._write_log(LogLevel.INFO, message, component)

    def error(self, message: str, component: str = "SYSTEM"):
        self._write_log(LogLevel.ERROR, message, component)

    def set_log_level(self, level: LogLevel):
        self.min_level = level

    def close(self):
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] [INFO] [SYSTEM] logger {self.name} closed\n")
