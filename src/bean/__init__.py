import abc
import functools
from typing import Any, TypeVar, Collection, Union, Optional

from utils import exception_utils
from utils.code_utils import import_module_and_get_attribute
from utils.collection_utils import to_collection
from utils.enum_utils import NameLookupEnum
from utils.supplier import Supplier, MemoizedSupplier

T = TypeVar("T")


class BeanName(NameLookupEnum):
    CONFIG = 0
    DYNAMODB_CLIENT = 1
    DYNAMODB = 2
    FIREBASE_ADMIN = 3
    FIREBASE_CERT_BUILDER = 4
    FIREBASE_APP = 5
    FIRESTORE = 6
    RECORD_STORE = 7
    SEQUENCE_REPO = 8
    COURSES_REPO = 9
    CLIENT_CODES_REPO = 10
    MEMBERS_REPO = 11


BeanSupplier = Supplier[T]


class BeanInitializationException(Exception):
    def __init__(self, bean_name: BeanName, message: str = None):
        message = message if message is not None else exception_utils.dump_ex()

        super(BeanInitializationException, self).__init__(f"Initialization of bean '{bean_name.name}' "
                                                          f"failed: {message}")


class Bean(metaclass=abc.ABCMeta):

    @abc.abstractmethod
    def get_instance(self) -> Any:
        raise NotImplementedError()

    def create_supplier(self) -> BeanSupplier[T]:
        return MemoizedSupplier(self.get_instance)


class BeanRegistry(metaclass=abc.ABCMeta):

    def find_bean_by_name(self, name: str) -> Optional[Bean]:
        bean_name = BeanName._value_of(name, "Bean")
        return self.find_bean(bean_name)

    def get_bean_by_name(self, name: str) -> Bean:
        bean = self.find_bean_by_name(name)
        if bean is None:
            raise ValueError(f"No bean with name '{name}' found.")
        return bean

    @abc.abstractmethod
    def find_bean(self, bean_name: BeanName) -> Optional[Bean]:
        raise NotImplementedError()

    def get_bean(self, bean_name: BeanName) -> Bean:
        bean = self.find_bean(bean_name)
        if bean is None:
            raise BeanInitializationException(bean_name, f"No bean registered for {bean_name.name}.")
        return bean


registry_supplier: Supplier[BeanRegistry] = MemoizedSupplier(lambda:
                                                             import_module_and_get_attribute("beans",
                                                                                             "registry",
                                                                                             from_module="bean"))


def inject(bean_instances: Union[BeanName, Collection[BeanName]] = None,
           beans: Union[BeanName, Collection[BeanName]] = None):
    """
    Used to inject bean instances or beans into a function call. They will be added to the end of the argument list,
    in the specified order (starting with instances then beans)
    :param bean_instances: bean instances to inject.
    :param beans: beans to inject
    """
    bean_instances = to_collection(bean_instances)
    beans = to_collection(beans)

    def load_bean_args():
        bean_args = []
        if bean_instances is not None:
            for bv in bean_instances:
                bean_args.append(get_bean_instance(bv))
        if beans is not None:
            for bv in beans:
                bean_args.append(registry_supplier.get().get_bean(bv))
        return bean_args

    def decorator(wrapped_function):
        @functools.wraps(wrapped_function)
        def _inner_wrapper(*args):
            args_copy = list(args)
            args_copy.extend(load_bean_args())
            return wrapped_function(*args_copy)

        return _inner_wrapper

    return decorator


def get_bean_instance(name: BeanName) -> Any:
    return registry_supplier.get().get_bean(name).get_instance()
