import os

# Protect us from accidentally hitting an actual AWS account
os.environ['AWS_ACCESS_KEY_ID'] = "invalid"
os.environ['AWS_SECRET_ACCESS_KEY'] = "invalid"
os.environ['AWS_DEFAULT_REGION'] = "us-west-1"

from typing import List, Optional

from google.api_core.exceptions import ServiceUnavailable

from admin.prompter import Prompter
from bean import BeanName, beans, get_bean_instance
from better_test_case import BetterTestCase
from botomocks.dynamodb_mock import MockDynamoDbClient
from config import Config, DYNAMODB_STORE, FIRESTORE_STORE, SEQUENCES_COLLECTION, COURSES_COLLECTION, \
    CLIENT_CODES_COLLECTION, MEMBERS_COLLECTION
from mocks.gcp import install_firebase
from mocks.gcp.firebase_admin import firestore
from repos.record_store import RecordStore
from repos.sequences import SequenceRepo
from support.console import ScriptedConsole

TABLE_PREFIX = "Test"

ALL_COLLECTIONS = (SEQUENCES_COLLECTION, COURSES_COLLECTION, CLIENT_CODES_COLLECTION, MEMBERS_COLLECTION)


def setup_ddb(ddb_mock: MockDynamoDbClient, config: Config):
    for collection in ALL_COLLECTIONS:
        ddb_mock.add_table(config.table_name(collection))


class BaseTest(BetterTestCase):
    """
    Wires the beans to in-memory stores. Subclasses pick the record store with store_type.
    """
    store_type = FIRESTORE_STORE

    def setUp(self) -> None:
        beans.reset()
        self.config = Config(record_store=self.store_type, table_prefix=TABLE_PREFIX)
        beans.override_bean(BeanName.CONFIG, self.config)

        self.ddb_mock = MockDynamoDbClient()
        setup_ddb(self.ddb_mock, self.config)
        beans.override_bean(BeanName.DYNAMODB_CLIENT, self.ddb_mock)

        self.firestore_mock: firestore.MockFirestoreClient = install_firebase()

        self.record_store: RecordStore = get_bean_instance(BeanName.RECORD_STORE)
        self.sequence_repo: SequenceRepo = get_bean_instance(BeanName.SEQUENCE_REPO)

    def tearDown(self) -> None:
        beans.reset()
        firestore.reset()

    def create_prompter(self, answers: Optional[List[str]] = None) -> Prompter:
        self.console = ScriptedConsole(answers)
        return Prompter(self.console.input, self.console.output)

    def set_unavailable(self, unavailable: bool = True):
        if self.store_type == DYNAMODB_STORE:
            self.ddb_mock.set_unavailable(unavailable)
        else:
            self.firestore_mock.fail_with(ServiceUnavailable("Firestore is down") if unavailable else None)


class DynamoDbTest(BaseTest):
    store_type = DYNAMODB_STORE


class FirestoreTest(BaseTest):
    store_type = FIRESTORE_STORE
