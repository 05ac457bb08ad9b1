from types import ModuleType
from typing import Any, Callable, Dict, Optional

from gcp import is_already_exists, is_not_found, is_service_failure
from utils import exception_utils

FirestoreDocument = Dict[str, Any]


class DocumentExistsException(Exception):
    def __init__(self):
        super(DocumentExistsException, self).__init__("Document already exists")


class DocumentNotFoundException(Exception):
    def __init__(self):
        super(DocumentNotFoundException, self).__init__("Document not found")


class FirestoreUnavailableException(Exception):
    def __init__(self, ex: Any):
        super(FirestoreUnavailableException, self).__init__(exception_utils.get_exception_message(ex))


def _handle_exception(ex: Exception):
    if is_already_exists(ex):
        raise DocumentExistsException()
    if is_not_found(ex):
        raise DocumentNotFoundException()
    if is_service_failure(ex):
        raise FirestoreUnavailableException(ex)
    raise ex


class Firestore:
    """
    Thin wrapper around the Firestore client obtained through firebase_admin.
    """

    def __init__(self, firebase_admin: ModuleType, app: Any):
        self.__firestore = firebase_admin.firestore
        self.__client = self.__firestore.client(app)

    @property
    def server_timestamp(self) -> Any:
        return self.__firestore.SERVER_TIMESTAMP

    @staticmethod
    def _execute(caller: Callable) -> Any:
        try:
            return caller()
        except Exception as ex:
            _handle_exception(ex)
            return None

    def __document(self, collection: str, key: str):
        return self.__client.collection(collection).document(key)

    def find_document(self, collection: str, key: str) -> Optional[FirestoreDocument]:
        snapshot = self._execute(lambda: self.__document(collection, key).get())
        if not snapshot.exists:
            return None
        return snapshot.to_dict()

    def create_document(self, collection: str, key: str, data: FirestoreDocument):
        """
        Creates the document, only if it does not exist.

        :raises DocumentExistsException: if there is already a document with the given key.
        """
        self._execute(lambda: self.__document(collection, key).create(data))

    def set_document(self, collection: str, key: str, data: FirestoreDocument, merge: bool = False):
        self._execute(lambda: self.__document(collection, key).set(data, merge=merge))

    def update_document(self, collection: str, key: str, data: FirestoreDocument):
        """
        Updates fields in an existing document.

        :raises DocumentNotFoundException: if the document does not exist.
        """
        self._execute(lambda: self.__document(collection, key).update(data))

    def increment(self, collection: str, key: str, field: str, delta: int = 1) -> int:
        """
        Atomically adds delta to a numeric field, creating the document with a base of 0 if it does not exist.

        The read and the increment run in one transaction, so the value returned is the one this call produced.

        :return: the value of the field after the increment.
        """
        firestore = self.__firestore
        reference = self.__document(collection, key)

        @firestore.transactional
        def apply(transaction) -> int:
            snapshot = reference.get(transaction=transaction)
            current = snapshot.to_dict() if snapshot.exists else None
            value = (current or {}).get(field) or 0
            transaction.set(reference, {field: firestore.Increment(delta)}, merge=True)
            return value + delta

        try:
            return self._execute(lambda: apply(self.__client.transaction()))
        except ValueError as ex:
            # Raised by the client once a contended transaction runs out of attempts
            raise FirestoreUnavailableException(ex)
