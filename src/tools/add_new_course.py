import sys
from typing import List, Optional

from admin.courses import CourseAdmin
from admin.prompter import Prompter
from bean import BeanName, get_bean_instance
from tools.support.command_line import CommandLineProcessor
from tools.support.runner import run_tool

USAGE = "[--env NAME=VALUE]... [--yes]"


def execute(cli: CommandLineProcessor, prompter: Prompter) -> int:
    confirm = not cli.find_and_remove("--yes")
    cli.assert_no_more()
    course_admin = CourseAdmin(
        get_bean_instance(BeanName.SEQUENCE_REPO),
        get_bean_instance(BeanName.COURSES_REPO),
        get_bean_instance(BeanName.CONFIG),
        prompter
    )
    course_admin.add_new_course(confirm)
    return 0


def main(argv: Optional[List[str]] = None, prompter: Optional[Prompter] = None) -> int:
    return run_tool(USAGE, execute, argv, prompter)


if __name__ == '__main__':
    sys.exit(main())
