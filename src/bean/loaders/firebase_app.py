import os
from types import ModuleType
from typing import Callable, Any

from bean import BeanName, inject
from config import Config


@inject(bean_instances=(BeanName.CONFIG, BeanName.FIREBASE_ADMIN, BeanName.FIREBASE_CERT_BUILDER))
def init(config: Config, firebase_admin: ModuleType, cert_builder: Callable[[str], Any]):
    key_file = os.path.expanduser(config.service_account_key_file)
    return firebase_admin.initialize_app(cert_builder(key_file))
