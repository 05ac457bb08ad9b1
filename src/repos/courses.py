from config import COURSES_COLLECTION
from courses import Course
from repos.abstract_repo import AbstractStoreRepo


class CoursesRepo(AbstractStoreRepo):
    __collection__ = COURSES_COLLECTION
    __initializer__ = Course.from_record
