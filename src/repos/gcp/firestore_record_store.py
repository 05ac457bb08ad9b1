from datetime import datetime, timezone
from typing import Any, Callable, Optional

from gcp.firestore import Firestore, DocumentExistsException, DocumentNotFoundException, \
    FirestoreUnavailableException
from repos import StoreUnavailable, RecordNotFound
from repos.record_store import RecordStore, StoreRecord
from utils import exception_utils


def _execute(caller: Callable) -> Any:
    try:
        return caller()
    except FirestoreUnavailableException as ex:
        raise StoreUnavailable(f"Firestore request failed: {exception_utils.get_exception_message(ex)}") from ex


class FirestoreRecordStore(RecordStore):
    """
    Keeps each collection as a Firestore collection, with the key as the document id.
    """

    def __init__(self, firestore: Firestore):
        self.firestore = firestore

    def fetch(self, collection: str, key: str) -> Optional[StoreRecord]:
        return _execute(lambda: self.firestore.find_document(collection, key))

    def create(self, collection: str, key: str, record: StoreRecord) -> bool:
        data = self.prepare_record(record)
        try:
            _execute(lambda: self.firestore.create_document(collection, key, data))
            return True
        except DocumentExistsException:
            return False

    def increment(self, collection: str, key: str, attribute: str, delta: int = 1) -> int:
        return _execute(lambda: self.firestore.increment(collection, key, attribute, delta))

    def update(self, collection: str, key: str, patches: StoreRecord):
        data = self.prepare_record(patches)
        try:
            _execute(lambda: self.firestore.update_document(collection, key, data))
        except DocumentNotFoundException:
            raise RecordNotFound(collection, key)

    def put(self, collection: str, key: str, record: StoreRecord):
        data = self.prepare_record(record)
        _execute(lambda: self.firestore.set_document(collection, key, data))

    def _convert_timestamp(self, value: datetime) -> Any:
        # Naive timestamps are taken as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def _server_timestamp(self) -> Any:
        return self.firestore.server_timestamp
