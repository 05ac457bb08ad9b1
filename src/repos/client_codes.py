from config import CLIENT_CODES_COLLECTION
from members import ClientCode
from repos.abstract_repo import AbstractStoreRepo


class ClientCodesRepo(AbstractStoreRepo):
    __collection__ = CLIENT_CODES_COLLECTION
    __initializer__ = ClientCode.from_record
