import json
import logging
from logging import StreamHandler
from threading import local
from typing import Callable, Optional

LoggingHook = Callable[[str], None]

_logging_hook: Optional[LoggingHook] = None

#
# LogRecord attributes left out of the JSON output
#
_IGNORED_ATTRIBUTES = frozenset((
    'msg', 'args', 'process', 'processName', 'thread', 'threadName', 'relativeCreated', 'lineno', 'levelno',
    'msecs', 'funcName', 'pathname', 'filename', 'module', 'exc_text', 'exc_info', 'stack_info', 'created',
    'levelname', 'taskName'
))


class JsonFormatter(logging.Formatter):
    """
    Formats each record as one JSON object, including the thread's logging info (see loghelper.set_logging_info).
    """

    def __init__(self, thread_local: local):
        super().__init__()
        self.thread_local = thread_local

    def format(self, record: logging.LogRecord) -> str:
        log_record = {key: value for key, value in record.__dict__.items() if key not in _IGNORED_ATTRIBUTES}
        log_record['message'] = record.getMessage()
        log_record['level'] = record.levelname
        log_record['timestamp'] = int(record.created * 1000)
        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)

        data = getattr(self.thread_local, 'data', None)
        if data is not None:
            log_record.update(data)

        output = json.dumps(log_record, default=str)
        if _logging_hook is not None:
            _logging_hook(output)
        return output


def setup(handler: StreamHandler, thread_local: local):
    handler.setFormatter(JsonFormatter(thread_local))


def set_logging_hook(hook: Optional[LoggingHook]):
    global _logging_hook
    _logging_hook = hook
