from bean import BeanName, Bean, inject
from config import Config, DYNAMODB_STORE
from repos.aws.aws_record_store import AwsRecordStore
from repos.gcp.firestore_record_store import FirestoreRecordStore
from repos.record_store import RecordStore


@inject(bean_instances=BeanName.CONFIG, beans=(BeanName.DYNAMODB, BeanName.FIRESTORE))
def init(config: Config, ddb_bean: Bean, firestore_bean: Bean) -> RecordStore:
    if config.record_store == DYNAMODB_STORE:
        return AwsRecordStore(ddb_bean.get_instance(), config)
    return FirestoreRecordStore(firestore_bean.get_instance())
