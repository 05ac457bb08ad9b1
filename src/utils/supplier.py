import abc
from threading import RLock
from typing import Callable, Generic, TypeVar, Optional

T = TypeVar("T")


class Supplier(Generic[T], metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def get(self) -> T:
        raise NotImplementedError()


class MemoizedSupplier(Supplier):
    """
    Calls the getter the first time get() is called, and returns the same value from then on.

    Concurrent first calls wait on each other, so the getter runs once.
    """

    def __init__(self, getter: Callable[[], T]):
        assert getter is not None
        self.__mutex = RLock()
        self.__getter: Optional[Callable[[], T]] = getter
        self.__value: Optional[T] = None

    def get(self) -> T:
        if self.__getter is not None:
            with self.__mutex:
                if self.__getter is not None:
                    self.__value = self.__getter()
                    self.__getter = None
        return self.__value
