import sys
from typing import List, Optional

from admin.prompter import Prompter
from bean import BeanName, get_bean_instance
from config import Config
from repos.sequences import SequenceRepo
from tools.support.command_line import CommandLineProcessor
from tools.support.runner import run_tool
from utils.string_utils import format_identifier

USAGE = "[--env NAME=VALUE]... [--peek] [--prefix PREFIX] [--digits N] sequence-name"


def execute(cli: CommandLineProcessor, prompter: Prompter) -> int:
    peek = cli.find_and_remove("--peek")
    prefix = cli.find_and_remove_arg_plus_1("--prefix")
    digits = cli.find_and_remove_arg_plus_int("--digits")
    name = cli.get_next_arg("sequence-name")
    cli.assert_no_more()

    repo: SequenceRepo = get_bean_instance(BeanName.SEQUENCE_REPO)
    value = repo.peek(name) if peek else repo.allocate(name)
    if prefix is not None:
        config: Config = get_bean_instance(BeanName.CONFIG)
        prompter.say(format_identifier(prefix, value, digits if digits is not None else config.identifier_digits))
    else:
        prompter.say(str(value))
    return 0


def main(argv: Optional[List[str]] = None, prompter: Optional[Prompter] = None) -> int:
    return run_tool(USAGE, execute, argv, prompter)


if __name__ == '__main__':
    sys.exit(main())
