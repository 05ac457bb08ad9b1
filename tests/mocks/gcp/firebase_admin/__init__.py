from typing import Any, List

from mocks.gcp.firebase_admin import credentials as c
from mocks.gcp.firebase_admin import firestore as f

credentials = c
firestore = f


class MockApp:
    def __init__(self, credential: Any):
        self.credential = credential


apps: List[MockApp] = []


def initialize_app(credential: Any) -> MockApp:
    app = MockApp(credential)
    apps.append(app)
    return app


def reset():
    apps.clear()
    firestore.reset()
