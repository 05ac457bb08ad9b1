import importlib
from types import ModuleType
from typing import Any


def import_module(module_name: str, from_module: str = None) -> ModuleType:
    if from_module is not None:
        module_name = f"{from_module}.{module_name}"
    return importlib.import_module(module_name)


def import_module_and_get_attribute(module_name: str, attribute_name: str, from_module: str = None) -> Any:
    mod = import_module(module_name, from_module)
    return mod.__dict__[attribute_name]
