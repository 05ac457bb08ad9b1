import abc
from datetime import date, datetime
from typing import Any, Dict, Optional

StoreRecord = Dict[str, Any]


class _ServerTimestamp:
    def __repr__(self):
        return "SERVER_TIMESTAMP"


#
# Use as a field value to have the store fill in its own timestamp at write time
#
SERVER_TIMESTAMP = _ServerTimestamp()


class RecordStore(metaclass=abc.ABCMeta):
    """
    A document store, holding records in named collections under string keys.

    Every operation raises StoreUnavailable when the store cannot be reached, the credentials are rejected or
    the store refuses the request.
    """

    @abc.abstractmethod
    def fetch(self, collection: str, key: str) -> Optional[StoreRecord]:
        """
        Reads a record.

        :param collection: the collection.
        :param key: the record key.
        :return: the record, or None if there is no record with the given key.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def create(self, collection: str, key: str, record: StoreRecord) -> bool:
        """
        Writes a record, only if there is no record with the given key.

        :return: True if the record was written, False if one already existed (nothing is written).
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def increment(self, collection: str, key: str, attribute: str, delta: int = 1) -> int:
        """
        Atomically adds delta to a numeric attribute. A missing record or attribute starts from 0.

        :return: the value of the attribute produced by this increment.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def update(self, collection: str, key: str, patches: StoreRecord):
        """
        Sets fields in an existing record.

        :raises RecordNotFound: if there is no record with the given key.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def put(self, collection: str, key: str, record: StoreRecord):
        """
        Writes a record, replacing any existing record with the same key.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def _convert_timestamp(self, value: datetime) -> Any:
        raise NotImplementedError()

    @abc.abstractmethod
    def _server_timestamp(self) -> Any:
        raise NotImplementedError()

    def _convert_date(self, value: date) -> Any:
        return self._convert_timestamp(datetime(value.year, value.month, value.day))

    def prepare_value(self, value: Any) -> Any:
        if value is SERVER_TIMESTAMP:
            return self._server_timestamp()
        if isinstance(value, datetime):
            return self._convert_timestamp(value)
        if isinstance(value, date):
            return self._convert_date(value)
        if isinstance(value, dict):
            return self.prepare_record(value)
        if isinstance(value, (list, tuple)):
            return [self.prepare_value(v) for v in value]
        return value

    def prepare_record(self, record: StoreRecord) -> StoreRecord:
        """
        Converts the values of a record to what the store can hold.
        """
        return {key: self.prepare_value(value) for key, value in record.items()}
