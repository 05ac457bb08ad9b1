from bean import BeanName, inject
from repos.courses import CoursesRepo
from repos.record_store import RecordStore


@inject(bean_instances=BeanName.RECORD_STORE)
def init(store: RecordStore):
    return CoursesRepo(store)
