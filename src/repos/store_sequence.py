from config import SEQUENCES_COLLECTION, SEQUENCE_VALUE_ATTRIBUTE
from repos.record_store import RecordStore
from repos.sequences import SequenceRepo, validate_sequence_name
from utils import loghelper

logger = loghelper.get_logger(__name__)


class StoreSequenceRepo(SequenceRepo):
    """
    Keeps one counter record per sequence, holding the last value handed out.

    No locks are held here. Uniqueness comes from the store: the first value is written with a create that only
    succeeds if the counter is absent, and every later value comes from the store's atomic increment.
    """

    def __init__(self, store: RecordStore, collection: str = SEQUENCES_COLLECTION):
        self.store = store
        self.collection = collection

    def allocate(self, name: str) -> int:
        validate_sequence_name(name)
        current = self.store.fetch(self.collection, name)
        if current is None:
            if self.store.create(self.collection, name, {SEQUENCE_VALUE_ATTRIBUTE: 1}):
                logger.debug(f"Initialized sequence '{name}'.")
                return 1
            logger.debug(f"Sequence '{name}' was initialized by another caller.")
        value = self.store.increment(self.collection, name, SEQUENCE_VALUE_ATTRIBUTE, 1)
        logger.debug(f"Allocated {value} from sequence '{name}'.")
        return value

    def peek(self, name: str) -> int:
        validate_sequence_name(name)
        current = self.store.fetch(self.collection, name)
        if current is None:
            return 0
        return int(current.get(SEQUENCE_VALUE_ATTRIBUTE, 0))
