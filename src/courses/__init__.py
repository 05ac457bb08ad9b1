from datetime import datetime
from typing import Any, Dict, List, Optional

from config import DEFAULT_COURSE_DURATION_MINUTES, DEFAULT_COURSE_MAX_CAPACITY, DEFAULT_COURSE_PRICE
from repos import Serializable
from repos.record_store import SERVER_TIMESTAMP
from utils.date_utils import to_datetime


class Schedule:
    def __init__(self, days: List[str], time: str):
        self.days = days
        self.time = time

    def to_record(self) -> Dict[str, Any]:
        return {
            'days': list(self.days),
            'time': self.time
        }

    @classmethod
    def from_record(cls, record: Optional[Dict[str, Any]]) -> 'Schedule':
        record = record or {}
        return cls(list(record.get('days', [])), record.get('time', ''))

    def __eq__(self, other):
        if not isinstance(other, Schedule):
            return False
        return self.days == other.days and self.time == other.time


class Course(Serializable):
    def __init__(self,
                 course_id: str,
                 name: str,
                 description: str = '',
                 coach_name: str = '',
                 schedule: Schedule = None,
                 duration_minutes: int = DEFAULT_COURSE_DURATION_MINUTES,
                 max_capacity: int = DEFAULT_COURSE_MAX_CAPACITY,
                 price: float = DEFAULT_COURSE_PRICE,
                 start_date: Optional[datetime] = None,
                 end_date: Optional[datetime] = None,
                 tags: List[str] = None,
                 enrolled_uids: List[str] = None,
                 is_active: bool = True,
                 created_at: Optional[datetime] = None):
        self.course_id = course_id
        self.name = name
        self.description = description
        self.coach_name = coach_name
        self.schedule = schedule if schedule is not None else Schedule([], '')
        self.duration_minutes = duration_minutes
        self.max_capacity = max_capacity
        self.price = price
        self.start_date = start_date
        self.end_date = end_date
        self.tags = tags if tags is not None else []
        self.enrolled_uids = enrolled_uids if enrolled_uids is not None else []
        self.is_active = is_active
        self.created_at = created_at

    def get_key(self) -> str:
        return self.course_id

    def to_record(self) -> Dict[str, Any]:
        return {
            'id': self.course_id,
            'name': self.name,
            'description': self.description,
            'coachName': self.coach_name,
            'schedule': self.schedule.to_record(),
            'durationMinutes': self.duration_minutes,
            'maxCapacity': self.max_capacity,
            'enrolledUids': list(self.enrolled_uids),
            'price': self.price,
            'startDate': self.start_date,
            'endDate': self.end_date,
            'tags': list(self.tags),
            'isActive': self.is_active,
            'createdAt': self.created_at if self.created_at is not None else SERVER_TIMESTAMP
        }

    @classmethod
    def from_record(cls, key: str, record: Dict[str, Any]) -> 'Course':
        return cls(
            course_id=record.get('id', key),
            name=record['name'],
            description=record.get('description', ''),
            coach_name=record.get('coachName', ''),
            schedule=Schedule.from_record(record.get('schedule')),
            duration_minutes=record.get('durationMinutes', DEFAULT_COURSE_DURATION_MINUTES),
            max_capacity=record.get('maxCapacity', DEFAULT_COURSE_MAX_CAPACITY),
            price=record.get('price', DEFAULT_COURSE_PRICE),
            start_date=to_datetime(record.get('startDate')),
            end_date=to_datetime(record.get('endDate')),
            tags=list(record.get('tags', [])),
            enrolled_uids=list(record.get('enrolledUids', [])),
            is_active=record.get('isActive', True),
            created_at=to_datetime(record.get('createdAt'))
        )

    def describe(self) -> str:
        lines = [
            f"Course ID:    {self.course_id}",
            f"Name:         {self.name}",
            f"Description:  {self.description}",
            f"Coach:        {self.coach_name}",
            f"Schedule:     {', '.join(self.schedule.days)} at {self.schedule.time}",
            f"Duration:     {self.duration_minutes} minutes",
            f"Capacity:     {self.max_capacity}",
            f"Price:        {self.price:.2f}",
            f"Start date:   {_format_date(self.start_date)}",
            f"End date:     {_format_date(self.end_date)}",
            f"Tags:         {', '.join(self.tags)}"
        ]
        return "\n".join(lines)


def _format_date(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d") if value is not None else "(none)"
