from enum import Enum
from threading import RLock
from typing import Any, Optional


class NameLookupEnum(Enum):
    __name_table__ = None

    __mutex__ = RLock()

    @classmethod
    def _value_of(cls, name: Any, thing: Optional[str] = None) -> Any:
        if cls.__name_table__ is None:
            m = cls.__mutex__
            if m is not None:
                with m:
                    if cls.__name_table__ is None:
                        cls.__name_table__ = {}
                        for n in cls:
                            cls.__name_table__[n.name] = n
                    cls.__mutex__ = None

        v = cls.__name_table__.get(name)
        if v is not None or thing is None:
            return v
        raise ValueError(f"Invalid {thing}: '{name}'.")
