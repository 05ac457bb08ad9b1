import functools
import sys
import traceback
from io import StringIO
from traceback import print_exc
from typing import Any


def get_exception_message(ex):
    if hasattr(ex, "message"):
        return ex.message
    else:
        return f"{ex}"


def dump_ex(ex: Any = None) -> str:
    """
    Used to dump an exception, or the one currently being handled.

    :return: the stack trace string
    """
    io = StringIO()

    if ex is not None:
        print(f"<<< Exception: {get_exception_message(ex)} >>>\n", file=io)
        traceback.print_exception(type(ex), ex, ex.__traceback__, file=io)
    else:
        print_exc(None, io)
    return io.getvalue()


def never_raise():
    """
    Use this to decorate functions that should never let an exception be raised (for logging, etc).
    The exception is printed to stderr instead. Use with caution.
    """

    def decorator(wrapped_function):
        @functools.wraps(wrapped_function)
        def _inner_wrapper(*args, **kwargs):
            try:
                return wrapped_function(*args, **kwargs)
            except Exception as ex:
                print(dump_ex(ex), file=sys.stderr)

            return None

        return _inner_wrapper

    return decorator


def print_exception(ex: BaseException):
    traceback.print_exception(type(ex), ex, ex.__traceback__, file=sys.stderr)
