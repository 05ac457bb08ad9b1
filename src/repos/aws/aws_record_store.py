from datetime import datetime
from typing import Any, Callable, Optional

from aws.dynamodb import DynamoDb, PrimaryKeyViolationException, PreconditionFailedException, \
    ConnectionFailedException, ThrottlingException, ClientError, ResourceNotFoundException
from config import Config
from repos import StoreUnavailable, RecordNotFound
from repos.aws import KEY_ATTRIBUTE
from repos.record_store import RecordStore, StoreRecord
from utils import date_utils, exception_utils

_UNAVAILABLE_EXCEPTIONS = (ConnectionFailedException, ThrottlingException, ClientError, ResourceNotFoundException)


def _execute(caller: Callable) -> Any:
    try:
        return caller()
    except _UNAVAILABLE_EXCEPTIONS as ex:
        raise StoreUnavailable(f"DynamoDB request failed: {exception_utils.get_exception_message(ex)}") from ex


class AwsRecordStore(RecordStore):
    """
    Keeps each collection in its own DynamoDB table, keyed by a string hash key named 'id'.

    DynamoDB has no timestamp type, so timestamps are stored as epoch milliseconds.
    """

    def __init__(self, ddb: DynamoDb, config: Config):
        self.ddb = ddb
        self.config = config

    def __table(self, collection: str) -> str:
        return self.config.table_name(collection)

    def fetch(self, collection: str, key: str) -> Optional[StoreRecord]:
        item = _execute(lambda: self.ddb.find_item(self.__table(collection), {KEY_ATTRIBUTE: key}, consistent=True))
        if item is not None:
            item.pop(KEY_ATTRIBUTE, None)
        return item

    def __build_item(self, key: str, record: StoreRecord) -> StoreRecord:
        item = self.prepare_record(record)
        item[KEY_ATTRIBUTE] = key
        return item

    def create(self, collection: str, key: str, record: StoreRecord) -> bool:
        item = self.__build_item(key, record)
        try:
            _execute(lambda: self.ddb.put_item(self.__table(collection), item, key_attributes=(KEY_ATTRIBUTE,)))
            return True
        except PrimaryKeyViolationException:
            return False

    def increment(self, collection: str, key: str, attribute: str, delta: int = 1) -> int:
        return _execute(lambda: self.ddb.increment(self.__table(collection), {KEY_ATTRIBUTE: key}, attribute, delta))

    def update(self, collection: str, key: str, patches: StoreRecord):
        try:
            _execute(lambda: self.ddb.update_item(
                self.__table(collection),
                {KEY_ATTRIBUTE: key},
                self.prepare_record(patches),
                must_exist=True
            ))
        except PreconditionFailedException:
            raise RecordNotFound(collection, key)

    def put(self, collection: str, key: str, record: StoreRecord):
        item = self.__build_item(key, record)
        _execute(lambda: self.ddb.put_item(self.__table(collection), item))

    def _convert_timestamp(self, value: datetime) -> Any:
        return date_utils.to_epoch_millis(value)

    def _server_timestamp(self) -> Any:
        return date_utils.get_system_time_in_millis()
