from bean import beans, BeanName
from mocks.gcp import firebase_admin


def install_firebase():
    """
    Replaces firebase_admin with the in-memory mock and returns the mock Firestore client.
    """

    def cert_builder(key_file: str):
        return firebase_admin.credentials.Certificate(key_file)

    firebase_admin.reset()
    beans.override_bean(BeanName.FIREBASE_CERT_BUILDER, lambda: cert_builder)
    beans.override_bean(BeanName.FIREBASE_ADMIN, firebase_admin)
    return firebase_admin.firestore.client()
