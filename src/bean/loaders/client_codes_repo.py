from bean import BeanName, inject
from repos.client_codes import ClientCodesRepo
from repos.record_store import RecordStore


@inject(bean_instances=BeanName.RECORD_STORE)
def init(store: RecordStore):
    return ClientCodesRepo(store)
