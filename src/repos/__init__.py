import abc
from typing import Any, Dict, TypeVar


class StoreUnavailable(Exception):
    """
    Raised when the record store cannot be reached or rejects a request.
    """

    def __init__(self, message: str):
        super(StoreUnavailable, self).__init__(message)


class InvalidSequenceName(ValueError):
    def __init__(self, name: Any):
        super(InvalidSequenceName, self).__init__(f"Invalid sequence name: '{name}'.")


class RecordNotFound(Exception):
    def __init__(self, collection: str, key: str):
        super(RecordNotFound, self).__init__(f"No record in '{collection}' with key '{key}'.")


class RecordExists(Exception):
    def __init__(self, collection: str, key: str):
        super(RecordExists, self).__init__(f"A record in '{collection}' with key '{key}' already exists.")
        self.collection = collection
        self.key = key


Record = TypeVar("Record")


class Serializable(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def get_key(self) -> str:
        raise NotImplementedError()

    @abc.abstractmethod
    def to_record(self) -> Dict[str, Any]:
        raise NotImplementedError()
