from datetime import datetime
from typing import Any, Dict, Optional

from config import DEFAULT_MEMBERSHIP_STATUS, DEFAULT_MEMBER_ROLE
from repos import Serializable
from utils.date_utils import to_datetime


class ClientCode(Serializable):
    """
    A client code handed to a new member, carrying the member's details until the member claims it
    by signing up.
    """

    def __init__(self,
                 code: str,
                 email: str,
                 full_name: str,
                 join_date: datetime,
                 subscription_end_date: datetime,
                 age: Optional[int] = None,
                 sex: str = '',
                 primary_phone: str = '',
                 address: str = '',
                 emergency_contact: str = '',
                 date_of_birth: Optional[datetime] = None,
                 membership_status: str = DEFAULT_MEMBERSHIP_STATUS,
                 role: str = DEFAULT_MEMBER_ROLE,
                 is_valid: bool = True,
                 is_claimed: bool = False):
        self.code = code
        self.email = email
        self.full_name = full_name
        self.join_date = join_date
        self.subscription_end_date = subscription_end_date
        self.age = age
        self.sex = sex
        self.primary_phone = primary_phone
        self.address = address
        self.emergency_contact = emergency_contact
        self.date_of_birth = date_of_birth
        self.membership_status = membership_status
        self.role = role
        self.is_valid = is_valid
        self.is_claimed = is_claimed

    def get_key(self) -> str:
        return self.code

    def to_record(self) -> Dict[str, Any]:
        return {
            'email': self.email,
            'fullName': self.full_name,
            'age': self.age,
            'sex': self.sex,
            'primaryPhone': self.primary_phone,
            'address': self.address,
            'emergencyContact': self.emergency_contact,
            'dateOfBirth': self.date_of_birth,
            'membershipStatus': self.membership_status,
            'role': self.role,
            'joinDate': self.join_date,
            'subscriptionEndDate': self.subscription_end_date,
            'isValid': self.is_valid,
            'isClaimed': self.is_claimed
        }

    @classmethod
    def from_record(cls, key: str, record: Dict[str, Any]) -> 'ClientCode':
        return cls(
            code=key,
            email=record['email'],
            full_name=record.get('fullName', ''),
            join_date=to_datetime(record.get('joinDate')),
            subscription_end_date=to_datetime(record.get('subscriptionEndDate')),
            age=record.get('age'),
            sex=record.get('sex', ''),
            primary_phone=record.get('primaryPhone', ''),
            address=record.get('address', ''),
            emergency_contact=record.get('emergencyContact', ''),
            date_of_birth=to_datetime(record.get('dateOfBirth')),
            membership_status=record.get('membershipStatus', DEFAULT_MEMBERSHIP_STATUS),
            role=record.get('role', DEFAULT_MEMBER_ROLE),
            is_valid=record.get('isValid', True),
            is_claimed=record.get('isClaimed', False)
        )

    def describe(self) -> str:
        lines = [
            f"Client code:        {self.code}",
            f"Full name:          {self.full_name}",
            f"Age:                {self.age if self.age is not None else ''}",
            f"Sex:                {self.sex}",
            f"Email:              {self.email}",
            f"Primary phone:      {self.primary_phone}",
            f"Address:            {self.address}",
            f"Emergency contact:  {self.emergency_contact}",
            f"Date of birth:      {_format_date(self.date_of_birth)}",
            f"Membership status:  {self.membership_status}",
            f"Role:               {self.role}",
            f"Subscription ends:  {_format_date(self.subscription_end_date)}"
        ]
        return "\n".join(lines)


class Member(Serializable):
    def __init__(self,
                 client_code: str,
                 full_name: str,
                 email: str,
                 join_date: datetime,
                 subscription_end_date: datetime,
                 age: Optional[int] = None,
                 sex: str = '',
                 primary_phone: str = '',
                 address: str = '',
                 emergency_contact: str = '',
                 membership_status: str = DEFAULT_MEMBERSHIP_STATUS,
                 role: str = DEFAULT_MEMBER_ROLE):
        self.client_code = client_code
        self.full_name = full_name
        self.email = email
        self.join_date = join_date
        self.subscription_end_date = subscription_end_date
        self.age = age
        self.sex = sex
        self.primary_phone = primary_phone
        self.address = address
        self.emergency_contact = emergency_contact
        self.membership_status = membership_status
        self.role = role

    def get_key(self) -> str:
        return self.client_code

    def to_record(self) -> Dict[str, Any]:
        return {
            'clientCode': self.client_code,
            'fullName': self.full_name,
            'age': self.age,
            'sex': self.sex,
            'email': self.email,
            'primaryPhone': self.primary_phone,
            'address': self.address,
            'emergencyContact': self.emergency_contact,
            'membershipStatus': self.membership_status,
            'joinDate': self.join_date,
            'role': self.role,
            'subscriptionEndDate': self.subscription_end_date
        }

    @classmethod
    def from_record(cls, key: str, record: Dict[str, Any]) -> 'Member':
        return cls(
            client_code=record.get('clientCode', key),
            full_name=record.get('fullName', ''),
            email=record['email'],
            join_date=to_datetime(record.get('joinDate')),
            subscription_end_date=to_datetime(record.get('subscriptionEndDate')),
            age=record.get('age'),
            sex=record.get('sex', ''),
            primary_phone=record.get('primaryPhone', ''),
            address=record.get('address', ''),
            emergency_contact=record.get('emergencyContact', ''),
            membership_status=record.get('membershipStatus', DEFAULT_MEMBERSHIP_STATUS),
            role=record.get('role', DEFAULT_MEMBER_ROLE)
        )


def _format_date(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d") if value is not None else "(none)"
