from types import ModuleType

from bean import BeanName, inject


@inject(bean_instances=BeanName.FIREBASE_ADMIN)
def init(firebase_admin: ModuleType):
    return firebase_admin.credentials.Certificate
