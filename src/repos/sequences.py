import abc
import re
from typing import Any

from repos import InvalidSequenceName

_SEQUENCE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_\-]{0,127}$")


def validate_sequence_name(name: Any) -> str:
    if not isinstance(name, str) or _SEQUENCE_NAME_PATTERN.match(name) is None:
        raise InvalidSequenceName(name)
    return name


class SequenceRepo(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def allocate(self, name: str) -> int:
        """
        Allocates the next value in a sequence. Values start at 1, and concurrent callers never receive the same
        value.

        :param name: the sequence name.
        :return: the allocated value.
        :raises InvalidSequenceName: if the name is empty or malformed.
        :raises StoreUnavailable: if the value could not be allocated. No value should be assumed allocated.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def peek(self, name: str) -> int:
        """
        The last value allocated in a sequence, or 0 if none has been.
        """
        raise NotImplementedError()
