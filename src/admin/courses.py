from typing import Optional

from admin.prompter import Prompter
from config import Config, COURSE_SEQUENCE, COURSE_PREFIX, COURSES_COLLECTION
from courses import Course, Schedule
from repos import RecordExists
from repos.courses import CoursesRepo
from repos.sequences import SequenceRepo
from utils import loghelper
from utils.string_utils import format_identifier

logger = loghelper.get_logger(__name__)


class CourseAdmin:
    def __init__(self, sequence_repo: SequenceRepo,
                 courses_repo: CoursesRepo,
                 config: Config,
                 prompter: Prompter):
        self.sequence_repo = sequence_repo
        self.courses_repo = courses_repo
        self.config = config
        self.prompter = prompter

    def next_course_id(self) -> str:
        value = self.sequence_repo.allocate(COURSE_SEQUENCE)
        return format_identifier(COURSE_PREFIX, value, self.config.identifier_digits)

    def collect_course(self, course_id: str) -> Course:
        p = self.prompter
        name = p.prompt_required("Course Name (e.g., Morning Yoga)")
        description = p.prompt("Course Description")
        coach_name = p.prompt("Coach Name")
        days = p.prompt_list("Schedule Days (e.g., Monday, Wednesday, Friday)")
        time = p.prompt("Schedule Time (e.g., 09:00 AM)")
        duration = p.prompt_int("Duration in minutes", self.config.course_duration_minutes, minimum=1)
        capacity = p.prompt_int("Max Capacity", self.config.course_max_capacity, minimum=1)
        price = p.prompt_float("Price", self.config.course_price, minimum=0.0)
        start_date = p.prompt_date("Start Date (YYYY-MM-DD)")
        end_date = p.prompt_date("End Date (YYYY-MM-DD, optional, can be same as start for one-off)")
        tags = p.prompt_list("Tags (comma-separated, e.g., yoga,beginner,wellness)")
        return Course(
            course_id,
            name,
            description=description,
            coach_name=coach_name,
            schedule=Schedule(days, time),
            duration_minutes=duration,
            max_capacity=capacity,
            price=price,
            start_date=start_date,
            end_date=end_date,
            tags=tags
        )

    def add_new_course(self, confirm: bool = True) -> Optional[Course]:
        """
        Allocates a course id, prompts for the course details and writes the course.

        :param confirm: whether to show the course and ask before writing it.
        :return: the course written, or None if the user declined.
        :raises StoreUnavailable: if the id could not be allocated or the course could not be written.
        :raises RecordExists: if a course with the allocated id already exists.
        """
        course_id = self.next_course_id()
        self.prompter.say(f"Generated Course ID: {course_id}")
        course = self.collect_course(course_id)
        if confirm:
            self.prompter.say()
            self.prompter.say(course.describe())
            if not self.prompter.prompt_yes("Add this course?"):
                self.prompter.say(f"Course '{course_id}' was not added.")
                return None

        if not self.courses_repo.create(course):
            raise RecordExists(COURSES_COLLECTION, course_id)
        logger.info(f"Added course {course_id}.")
        self.prompter.say(f"\nSuccessfully added course '{course.name}' with ID '{course_id}'.")
        self.prompter.say("You may need to restart or refresh the app to see the new course.")
        return course
