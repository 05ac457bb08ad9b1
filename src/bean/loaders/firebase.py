def init():
    import firebase_admin
    from firebase_admin import credentials, firestore

    return firebase_admin
