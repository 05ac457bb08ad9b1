from unittest import mock

from google.api_core.exceptions import PermissionDenied, DeadlineExceeded, InvalidArgument
from google.auth.exceptions import RefreshError

from base_test import FirestoreTest
from bean import BeanName, get_bean_instance
from gcp import is_service_failure
from gcp.firestore import Firestore, DocumentExistsException, DocumentNotFoundException, \
    FirestoreUnavailableException
from mocks.gcp.firebase_admin import firestore as firestore_mock_module


class FirestoreWrapperTest(FirestoreTest):
    firestore: Firestore

    def setUp(self) -> None:
        super().setUp()
        self.firestore = get_bean_instance(BeanName.FIRESTORE)

    def test_documents(self):
        self.assertIsNone(self.firestore.find_document("courses", "c1"))
        self.firestore.create_document("courses", "c1", {'name': 'Yoga', 'size': 1})
        self.assertRaises(DocumentExistsException,
                          lambda: self.firestore.create_document("courses", "c1", {'name': 'Other'}))
        self.assertEqual({'name': 'Yoga', 'size': 1}, self.firestore.find_document("courses", "c1"))

        self.firestore.update_document("courses", "c1", {'name': 'Pilates'})
        self.assertEqual({'name': 'Pilates', 'size': 1}, self.firestore.find_document("courses", "c1"))
        self.assertRaises(DocumentNotFoundException,
                          lambda: self.firestore.update_document("courses", "c2", {'name': 'x'}))

        self.firestore.set_document("courses", "c1", {'tags': ['a']}, merge=True)
        self.assertEqual({'name': 'Pilates', 'size': 1, 'tags': ['a']}, self.firestore.find_document("courses", "c1"))
        self.firestore.set_document("courses", "c1", {'name': 'Barre'})
        self.assertEqual({'name': 'Barre'}, self.firestore.find_document("courses", "c1"))

    def test_server_timestamp(self):
        self.assertSame(firestore_mock_module.SERVER_TIMESTAMP, self.firestore.server_timestamp)

    def test_increment(self):
        self.assertEqual(1, self.firestore.increment("sequences", "s", "currentValue"))
        self.assertEqual(6, self.firestore.increment("sequences", "s", "currentValue", 5))
        self.firestore.set_document("sequences", "t", {'label': 'x'})
        self.assertEqual(1, self.firestore.increment("sequences", "t", "currentValue"))
        self.assertEqual({'label': 'x', 'currentValue': 1}, self.firestore_mock.get_document("sequences", "t"))

    def test_exhausted_transaction(self):
        with mock.patch.object(self.firestore_mock, 'run_transaction',
                               side_effect=ValueError("Failed to commit transaction in 5 attempts.")):
            self.assertRaises(FirestoreUnavailableException,
                              lambda: self.firestore.increment("sequences", "s", "currentValue"))
        self.assertIsNone(self.firestore_mock.get_document("sequences", "s"))

    def test_exception_mapping(self):
        for failure in (PermissionDenied("Missing or insufficient permissions."),
                        DeadlineExceeded("Deadline exceeded"),
                        RefreshError("invalid_grant")):
            self.firestore_mock.fail_with(failure)
            with self.assertRaises(FirestoreUnavailableException, msg=type(failure).__name__):
                self.firestore.find_document("courses", "c1")

        self.firestore_mock.fail_with(KeyError("bug"))
        self.assertRaises(KeyError, lambda: self.firestore.find_document("courses", "c1"))

    def test_is_service_failure(self):
        self.assertTrue(is_service_failure(InvalidArgument("bad")))
        self.assertTrue(is_service_failure(RefreshError("expired")))
        self.assertFalse(is_service_failure(ValueError("bug")))
