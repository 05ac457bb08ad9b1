from types import ModuleType
from typing import Any

from bean import BeanName, inject
from gcp.firestore import Firestore


@inject(bean_instances=(BeanName.FIREBASE_ADMIN, BeanName.FIREBASE_APP))
def init(firebase_admin: ModuleType, app: Any):
    return Firestore(firebase_admin, app)
