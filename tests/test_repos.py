from datetime import datetime, timezone

from base_test import DynamoDbTest, FirestoreTest
from bean import BeanName, get_bean_instance
from courses import Course, Schedule
from members import ClientCode, Member
from repos.client_codes import ClientCodesRepo
from repos.courses import CoursesRepo
from repos.members import MembersRepo


def _course(course_id: str = "COURSE0001") -> Course:
    return Course(
        course_id,
        "Morning Yoga",
        description="Gentle start",
        coach_name="Ana",
        schedule=Schedule(["Monday", "Wednesday"], "09:00 AM"),
        price=100.0,
        start_date=datetime(2024, 3, 1, tzinfo=timezone.utc),
        tags=["yoga", "beginner"]
    )


class RepoProperties:
    def test_courses(self):
        repo: CoursesRepo = get_bean_instance(BeanName.COURSES_REPO)
        course = _course()
        self.assertTrue(repo.create(course))
        self.assertFalse(repo.create(_course()))

        found = repo.find("COURSE0001")
        self.assertEqual("COURSE0001", found.course_id)
        self.assertEqual("Morning Yoga", found.name)
        self.assertEqual(Schedule(["Monday", "Wednesday"], "09:00 AM"), found.schedule)
        self.assertEqual(60, found.duration_minutes)
        self.assertEqual(15, found.max_capacity)
        self.assertEqual(100.0, found.price)
        self.assertEqual(datetime(2024, 3, 1, tzinfo=timezone.utc), found.start_date)
        self.assertIsNone(found.end_date)
        self.assertEqual(["yoga", "beginner"], found.tags)
        self.assertEqual([], found.enrolled_uids)
        self.assertTrue(found.is_active)
        self.assertIsNotNone(found.created_at)

        self.assertIsNone(repo.find("COURSE0002"))

    def test_patch(self):
        repo: CoursesRepo = get_bean_instance(BeanName.COURSES_REPO)
        repo.create(_course())
        self.assertTrue(repo.patch("COURSE0001", {'isActive': False}))
        self.assertFalse(repo.find("COURSE0001").is_active)
        self.assertFalse(repo.patch("COURSE0009", {'isActive': False}))
        self.assertIsNone(repo.find("COURSE0009"))

    def test_client_codes(self):
        repo: ClientCodesRepo = get_bean_instance(BeanName.CLIENT_CODES_REPO)
        join_date = datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)
        code = ClientCode(
            "MEMBER0001",
            "member@example.com",
            "New Member",
            join_date=join_date,
            subscription_end_date=datetime(2024, 3, 31, 10, 30, tzinfo=timezone.utc),
            age=40,
            date_of_birth=datetime(1984, 5, 6, tzinfo=timezone.utc)
        )
        self.assertTrue(repo.create(code))
        found = repo.find("MEMBER0001")
        self.assertAttributeEquals("member@example.com", found, "email")
        self.assertEqual(40, found.age)
        self.assertEqual(join_date, found.join_date)
        self.assertEqual(datetime(1984, 5, 6, tzinfo=timezone.utc), found.date_of_birth)
        self.assertEqual("active", found.membership_status)
        self.assertEqual("member", found.role)
        self.assertTrue(found.is_valid)
        self.assertFalse(found.is_claimed)

        self.assertTrue(repo.patch("MEMBER0001", {'isClaimed': True}))
        self.assertTrue(repo.find("MEMBER0001").is_claimed)

    def test_members(self):
        repo: MembersRepo = get_bean_instance(BeanName.MEMBERS_REPO)
        member = Member(
            "TEST001",
            "Test Member",
            "test@example.com",
            join_date=datetime(2024, 3, 1, tzinfo=timezone.utc),
            subscription_end_date=datetime(2024, 3, 31, tzinfo=timezone.utc)
        )
        repo.replace(member)
        member.full_name = "Renamed"
        repo.replace(member)
        found = repo.find("TEST001")
        self.assertEqual("TEST001", found.client_code)
        self.assertEqual("Renamed", found.full_name)
        self.assertIsNone(found.age)


class DynamoDbRepoTest(RepoProperties, DynamoDbTest):
    pass


class FirestoreRepoTest(RepoProperties, FirestoreTest):
    pass
