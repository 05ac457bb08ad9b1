from aws.dynamodb import ClientError
from base_test import DynamoDbTest, FirestoreTest
from config import SEQUENCES_COLLECTION, SEQUENCE_VALUE_ATTRIBUTE, COURSE_SEQUENCE, COURSE_PREFIX
from repos import StoreUnavailable, InvalidSequenceName
from repos.store_sequence import StoreSequenceRepo
from support.thread_utils import run_all_at_once, run_parallel, create_rendezvous
from utils.string_utils import format_identifier

THREAD_COUNT = 16


class AllocatorProperties:
    """
    Properties every record store must give the allocator. Mixed into a test case per store.
    """
    sequence_repo: StoreSequenceRepo

    def hold_first_reads(self, party_count: int):
        raise NotImplementedError()

    def test_first_allocation(self):
        self.assertEqual(0, self.sequence_repo.peek("fresh"))
        self.assertEqual(1, self.sequence_repo.allocate("fresh"))
        self.assertEqual(1, self.sequence_repo.peek("fresh"))
        self.assertEqual({SEQUENCE_VALUE_ATTRIBUTE: 1}, self.record_store.fetch(SEQUENCES_COLLECTION, "fresh"))

    def test_monotonic(self):
        values = [self.sequence_repo.allocate("steps") for _ in range(10)]
        self.assertEqual(list(range(1, 11)), values)

    def test_course_id_scenario(self):
        self.assertEqual(1, self.sequence_repo.allocate(COURSE_SEQUENCE))
        value = self.sequence_repo.allocate(COURSE_SEQUENCE)
        self.assertEqual(2, value)
        self.assertEqual("COURSE0002", format_identifier(COURSE_PREFIX, value))

    def test_independent_names(self):
        self.assertEqual(1, self.sequence_repo.allocate("courseId"))
        self.assertEqual(2, self.sequence_repo.allocate("courseId"))
        self.assertEqual(1, self.sequence_repo.allocate("clientCode"))
        self.assertEqual(3, self.sequence_repo.allocate("courseId"))
        self.assertEqual(2, self.sequence_repo.allocate("clientCode"))

    def test_concurrent_allocations_are_unique(self):
        values = run_all_at_once(THREAD_COUNT, lambda: self.sequence_repo.allocate("x"))
        self.assertEqual(list(range(1, THREAD_COUNT + 1)), sorted(values))
        self.assertEqual(THREAD_COUNT, self.sequence_repo.peek("x"))

    def test_concurrent_allocations_on_existing_sequence(self):
        for _ in range(5):
            self.sequence_repo.allocate("x")
        values = run_all_at_once(THREAD_COUNT, lambda: self.sequence_repo.allocate("x"))
        self.assertEqual(list(range(6, THREAD_COUNT + 6)), sorted(values))

    def test_concurrent_allocations_across_names(self):
        names = ["a", "b", "c", "d"] * 8

        values = run_parallel(8, names, lambda name: (name, self.sequence_repo.allocate(name)))
        for name in ("a", "b", "c", "d"):
            allocated = sorted(v for n, v in values if n == name)
            self.assertEqual([1, 2, 3, 4, 5, 6, 7, 8], allocated)

    def test_initialization_race(self):
        # Both callers see the counter as absent before either creates it
        self.hold_first_reads(2)
        values = run_all_at_once(2, lambda: self.sequence_repo.allocate("y"))
        self.assertEqual([1, 2], sorted(values))
        self.assertEqual(2, self.sequence_repo.peek("y"))

    def test_store_unavailable(self):
        for _ in range(3):
            self.sequence_repo.allocate("z")
        self.set_unavailable()
        with self.assertRaises(StoreUnavailable):
            self.sequence_repo.allocate("z")
        with self.assertRaises(StoreUnavailable):
            self.sequence_repo.allocate("never-created")
        self.set_unavailable(False)
        self.assertEqual(3, self.sequence_repo.peek("z"))
        self.assertEqual(0, self.sequence_repo.peek("never-created"))
        self.assertEqual(4, self.sequence_repo.allocate("z"))

    def test_invalid_names(self):
        for name in ("", " ", "-leading", "has space", "slash/name", "a" * 129, None, 12):
            with self.assertRaises(InvalidSequenceName, msg=f"{name!r}"):
                self.sequence_repo.allocate(name)
        self.assertEqual(1, self.sequence_repo.allocate("a" * 128))
        self.assertEqual(1, self.sequence_repo.allocate("client_code-2"))


class DynamoDbAllocatorTest(AllocatorProperties, DynamoDbTest):

    def hold_first_reads(self, party_count: int):
        arrive = create_rendezvous(party_count)
        self.ddb_mock.on_after('GetItem', lambda operation_name, params: arrive())

    def test_allocation_uses_store_increment(self):
        self.sequence_repo.allocate("counted")
        self.sequence_repo.allocate("counted")
        self.assertEqual(1, self.ddb_mock.count_calls('PutItem'))
        self.assertEqual(1, self.ddb_mock.count_calls('UpdateItem'))
        item = self.ddb_mock.get_raw_item(self.config.table_name(SEQUENCES_COLLECTION), "counted")
        self.assertEqual({'id': {'S': 'counted'}, SEQUENCE_VALUE_ATTRIBUTE: {'N': '2'}}, item)

    def test_lost_create_falls_back_to_increment(self):
        def create_first(operation_name: str, params: dict):
            self.ddb_mock.on_after('GetItem', None)
            self.record_store.create(SEQUENCES_COLLECTION, "raced", {SEQUENCE_VALUE_ATTRIBUTE: 1})

        self.ddb_mock.on_after('GetItem', create_first)
        self.assertEqual(2, self.sequence_repo.allocate("raced"))

    def test_rejected_increment(self):
        self.record_store.put(SEQUENCES_COLLECTION, "corrupt", {SEQUENCE_VALUE_ATTRIBUTE: "three"})
        with self.assertRaises(StoreUnavailable) as cm:
            self.sequence_repo.allocate("corrupt")
        self.assertIsInstance(cm.exception.__cause__, ClientError)
        self.assertContains("incorrect data type", str(cm.exception))
        self.assertEqual({SEQUENCE_VALUE_ATTRIBUTE: "three"}, self.record_store.fetch(SEQUENCES_COLLECTION, "corrupt"))


class FirestoreAllocatorTest(AllocatorProperties, FirestoreTest):

    def hold_first_reads(self, party_count: int):
        arrive = create_rendezvous(party_count)
        self.firestore_mock.on_read(lambda collection, key: arrive())

    def test_allocation_uses_transaction(self):
        self.sequence_repo.allocate("counted")
        self.assertEqual(0, self.firestore_mock.transaction_count)
        self.sequence_repo.allocate("counted")
        self.sequence_repo.allocate("counted")
        self.assertEqual(2, self.firestore_mock.transaction_count)
        self.assertEqual({SEQUENCE_VALUE_ATTRIBUTE: 3},
                         self.firestore_mock.get_document(SEQUENCES_COLLECTION, "counted"))
