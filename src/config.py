import os
from typing import Optional

#
# Which record store to use: "firestore" or "dynamodb"
#
FIRESTORE_STORE = "firestore"
DYNAMODB_STORE = "dynamodb"
DEFAULT_RECORD_STORE = FIRESTORE_STORE

#
# Service account key used to authorize Firestore access
#
DEFAULT_SERVICE_ACCOUNT_KEY_FILE = "serviceAccountKey.json"

#
# Prepended to each collection name to form the DynamoDB table name
#
DEFAULT_TABLE_PREFIX = ""

SEQUENCES_COLLECTION = "sequences"
COURSES_COLLECTION = "courses"
CLIENT_CODES_COLLECTION = "clientCodes"
MEMBERS_COLLECTION = "members"

#
# Attribute in each sequence document holding the last value handed out
#
SEQUENCE_VALUE_ATTRIBUTE = "currentValue"

COURSE_SEQUENCE = "courseId"
COURSE_PREFIX = "COURSE"
CLIENT_CODE_SEQUENCE = "clientCode"
CLIENT_CODE_PREFIX = "MEMBER"

#
# Identifiers are zero-padded to this many digits, i.e. COURSE0001
#
DEFAULT_IDENTIFIER_DIGITS = 4

DEFAULT_COURSE_DURATION_MINUTES = 60
DEFAULT_COURSE_MAX_CAPACITY = 15
DEFAULT_COURSE_PRICE = 0.0

DEFAULT_SUBSCRIPTION_DAYS = 30
DEFAULT_MEMBERSHIP_STATUS = "active"
DEFAULT_MEMBER_ROLE = "member"

DEFAULT_TEST_CLIENT_CODE = "TEST001"


class Config:
    """
    Contains various global configuration values.
    """

    def __init__(self,
                 record_store: str = DEFAULT_RECORD_STORE,
                 service_account_key_file: str = DEFAULT_SERVICE_ACCOUNT_KEY_FILE,
                 table_prefix: str = DEFAULT_TABLE_PREFIX,
                 identifier_digits: int = DEFAULT_IDENTIFIER_DIGITS,
                 course_duration_minutes: int = DEFAULT_COURSE_DURATION_MINUTES,
                 course_max_capacity: int = DEFAULT_COURSE_MAX_CAPACITY,
                 course_price: float = DEFAULT_COURSE_PRICE,
                 subscription_days: int = DEFAULT_SUBSCRIPTION_DAYS,
                 membership_status: str = DEFAULT_MEMBERSHIP_STATUS,
                 member_role: str = DEFAULT_MEMBER_ROLE
                 ):
        record_store = record_store.lower()
        if record_store not in (FIRESTORE_STORE, DYNAMODB_STORE):
            raise ValueError(f"Unsupported record store: '{record_store}'.")
        self.record_store = record_store
        self.service_account_key_file = service_account_key_file
        self.table_prefix = table_prefix
        self.identifier_digits = identifier_digits
        self.course_duration_minutes = course_duration_minutes
        self.course_max_capacity = course_max_capacity
        self.course_price = course_price
        self.subscription_days = subscription_days
        self.membership_status = membership_status
        self.member_role = member_role

    def table_name(self, collection: str) -> str:
        return f"{self.table_prefix}{collection}"

    @classmethod
    def from_environment(cls) -> 'Config':
        """
        Builds the configuration, applying overrides from the environment.

        RECORD_STORE, SERVICE_ACCOUNT_KEY, DYNAMODB_TABLE_PREFIX and IDENTIFIER_DIGITS are recognized.
        """
        digits: Optional[str] = os.environ.get('IDENTIFIER_DIGITS')
        return cls(
            record_store=os.environ.get('RECORD_STORE', DEFAULT_RECORD_STORE),
            service_account_key_file=os.environ.get('SERVICE_ACCOUNT_KEY', DEFAULT_SERVICE_ACCOUNT_KEY_FILE),
            table_prefix=os.environ.get('DYNAMODB_TABLE_PREFIX', DEFAULT_TABLE_PREFIX),
            identifier_digits=int(digits) if digits else DEFAULT_IDENTIFIER_DIGITS
        )
