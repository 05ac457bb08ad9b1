import sys
from typing import List, Optional

from admin.members import MemberAdmin
from admin.prompter import Prompter
from bean import BeanName, get_bean_instance
from tools.support.command_line import CommandLineProcessor
from tools.support.runner import run_tool

USAGE = "[--env NAME=VALUE]... [--random-code] [--yes]"


def execute(cli: CommandLineProcessor, prompter: Prompter) -> int:
    random_code = cli.find_and_remove("--random-code")
    confirm = not cli.find_and_remove("--yes")
    cli.assert_no_more()
    member_admin = MemberAdmin(
        get_bean_instance(BeanName.SEQUENCE_REPO),
        get_bean_instance(BeanName.CLIENT_CODES_REPO),
        get_bean_instance(BeanName.MEMBERS_REPO),
        get_bean_instance(BeanName.CONFIG),
        prompter
    )
    member_admin.create_test_member(random_code=random_code, confirm=confirm)
    return 0


def main(argv: Optional[List[str]] = None, prompter: Optional[Prompter] = None) -> int:
    return run_tool(USAGE, execute, argv, prompter)


if __name__ == '__main__':
    sys.exit(main())
