from bean import BeanName, inject
from repos.record_store import RecordStore
from repos.store_sequence import StoreSequenceRepo


@inject(bean_instances=BeanName.RECORD_STORE)
def init(store: RecordStore):
    return StoreSequenceRepo(store)
