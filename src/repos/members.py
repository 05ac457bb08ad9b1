from config import MEMBERS_COLLECTION
from members import Member
from repos.abstract_repo import AbstractStoreRepo


class MembersRepo(AbstractStoreRepo):
    __collection__ = MEMBERS_COLLECTION
    __initializer__ = Member.from_record
