import json
import sys
import threading
from enum import IntEnum

from ksuid.timestamp import format_timestamp


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, name):
        try:
            return cls[str(name).upper()]
        except KeyError:
            choices = ", ".join(level.name for level in cls)
            raise ValueError(f"Unknown log level {name!r}, expected one of {choices}") from None


_logger = None
_logger_lock = threading.Lock()


class StructuredLogger:
    def __init__(self, level=LogLevel.INFO, stream=None):
        self.level = level
        self.stream = stream

    def _emit(self, level, message, error, fields):
        if level < self.level:
            return
        try:
            # reserved keys win over caller fields
            record = {**fields, "timestamp": format_timestamp(), "level": level.name, "msg": message}
            if error:
                record["err"] = str(error)
            print(json.dumps(record, default=str), file=self.stream or sys.stderr, flush=True)
        except Exception:
            pass

    def debug(self, message, /, **fields):
        self._emit(LogLevel.DEBUG, message, None, fields)

    def info(self, message, /, **fields):
        self._emit(LogLevel.INFO, message, None, fields)

    def warn(self, message, /, error=None, **fields):
        self._emit(LogLevel.WARN, message, error, fields)

    def error(self, message, /, error=None, **fields):
        self._emit(LogLevel.ERROR, message, error, fields)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None):
        global _logger
        with _logger_lock:
            _logger = cls(min_level, stream)
            return _logger


def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger
