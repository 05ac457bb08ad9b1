from threading import RLock
from typing import Union, Callable, Any, Dict, Optional

import boto3

from bean import BeanName, Bean, BeanInitializationException, BeanRegistry
from config import Config
from utils import exception_utils
from utils.code_utils import import_module_and_get_attribute

BeanValue = Union[Callable, Any]

_GLOBAL_MUTEX = RLock()


class _Boto3Loader:
    def __init__(self, service: str):
        self.service = service

    def invoke(self) -> Any:
        return boto3.client(self.service)


class _LazyLoader:
    def __init__(self, name: Optional[str]):
        self.name = name
        self.init_function = None

    def invoke(self) -> Any:
        if self.init_function is None:
            self.init_function = import_module_and_get_attribute(
                self.name,
                "init",
                "bean.loaders"
            )
        return self.init_function()


class _BeanImpl(Bean):
    def __init__(self, initializer: BeanValue):
        self.name: Optional[BeanName] = None
        self.__initializer = initializer
        self.__override_initializer = None
        self.__initialized = False
        self.__value = None
        self.__mutex: Optional[RLock] = None
        self.__init_in_progress = False

    def _set_name(self, name: BeanName):
        self.name = name
        if isinstance(self.__initializer, _LazyLoader):
            if self.__initializer.name is None:
                self.__initializer.name = name.name.lower()

    def __execute_with_lock(self, caller: Callable):
        if self.__mutex is None:
            with _GLOBAL_MUTEX:
                if self.__mutex is None:
                    self.__mutex = RLock()
        with self.__mutex:
            caller()

    def __initialize(self):
        assert not self.__init_in_progress, f"Bean initialization already in progress for {self.name}"
        self.__init_in_progress = True
        try:
            initializer = self.__override_initializer if self.__override_initializer else self.__initializer
            if isinstance(initializer, (_LazyLoader, _Boto3Loader)):
                self.__value = initializer.invoke()
            elif callable(initializer):
                self.__value = initializer()
            else:
                self.__value = initializer
            self.__initialized = True
            return
        except BaseException as ex:
            exception_utils.print_exception(ex)
            ex_to_raise = BeanInitializationException(self.name, exception_utils.get_exception_message(ex))
            ex_to_raise.__cause__ = ex
        finally:
            self.__init_in_progress = False
        raise ex_to_raise

    def set_initializer(self, value: Any):
        self.__override_initializer = value
        self.__initialized = False
        self.__value = None

    def reset(self):
        self.__value = None
        self.__initialized = False
        self.__override_initializer = None

    def get_instance(self):
        if not self.__initialized:
            def init():
                if not self.__initialized:
                    self.__initialize()

            self.__execute_with_lock(init)
        return self.__value


def _module(name: str = None) -> _BeanImpl:
    return _BeanImpl(_LazyLoader(name))


def _boto3(name: str) -> _BeanImpl:
    return _BeanImpl(_Boto3Loader(name))


_BEANS: Dict[BeanName, _BeanImpl] = {
    BeanName.CONFIG: _BeanImpl(Config.from_environment),
    BeanName.DYNAMODB_CLIENT: _boto3('dynamodb'),
    BeanName.DYNAMODB: _module(),
    BeanName.FIREBASE_ADMIN: _module('firebase'),
    BeanName.FIREBASE_CERT_BUILDER: _module(),
    BeanName.FIREBASE_APP: _module(),
    BeanName.FIRESTORE: _module(),
    BeanName.RECORD_STORE: _module(),
    BeanName.SEQUENCE_REPO: _module(),
    BeanName.COURSES_REPO: _module(),
    BeanName.CLIENT_CODES_REPO: _module(),
    BeanName.MEMBERS_REPO: _module()
}


def __setup_beans():
    for name, value in _BEANS.items():
        value._set_name(name)


__setup_beans()


def override_bean(name: BeanName, value: BeanValue):
    """
    This should be used for testing only.

    :param name: the bean name.
    :param value: the value for the bean.
    """
    assert isinstance(name, BeanName)
    b = _BEANS[name]
    b.set_initializer(value)


def reset():
    """
    Use during unit tests only!
    """
    for bean in _BEANS.values():
        bean.reset()
    __setup_beans()


class RegistryImpl(BeanRegistry):

    def find_bean(self, bean_name: BeanName) -> Optional[Bean]:
        return _BEANS.get(bean_name)


registry = RegistryImpl()
