import abc
from typing import Any, Callable, Dict, Optional

from repos import Record, RecordNotFound, Serializable
from repos.record_store import RecordStore, StoreRecord

INITIALIZER_ATTRIBUTE = '__initializer__'

COLLECTION_ATTRIBUTE = '__collection__'


class AbstractStoreRepo(metaclass=abc.ABCMeta):
    """
    Base class for repos holding one kind of record in a collection.

    Subclasses set __collection__ and __initializer__, a callable building the record from its key and the
    stored fields.
    """

    def __init__(self, store: RecordStore):
        self.store = store
        self.collection: str = self.get_attribute(COLLECTION_ATTRIBUTE)
        self.initializer: Callable[[str, StoreRecord], Any] = self.get_attribute(INITIALIZER_ATTRIBUTE)

    def get_attribute(self, name: str) -> Any:
        try:
            return getattr(self, name)
        except AttributeError:
            raise AttributeError(f"{name} attribute is required.")

    def create(self, entry: Serializable) -> bool:
        """
        Writes the entry, only if no entry with the same key exists.

        :return: True if the entry was written.
        """
        return self.store.create(self.collection, entry.get_key(), entry.to_record())

    def replace(self, entry: Serializable):
        self.store.put(self.collection, entry.get_key(), entry.to_record())

    def find(self, key: str) -> Optional[Record]:
        record = self.store.fetch(self.collection, key)
        if record is None:
            return None
        return self.initializer(key, record)

    def patch(self, key: str, patches: Dict[str, Any]) -> bool:
        try:
            self.store.update(self.collection, key, patches)
            return True
        except RecordNotFound:
            return False
