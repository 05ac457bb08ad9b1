import logging
import sys
from typing import Callable, List, Optional

from admin.prompter import Prompter
from bean import BeanInitializationException
from repos import StoreUnavailable, RecordExists, InvalidSequenceName
from tools.support.command_line import CommandLineProcessor, CommandLineException
from utils import loghelper

logger = loghelper.get_logger(__name__)

ToolBody = Callable[[CommandLineProcessor, Prompter], int]

EXIT_FAILURE = 1
EXIT_USAGE = 2


def run_tool(usage: str,
             body: ToolBody,
             argv: Optional[List[str]] = None,
             prompter: Optional[Prompter] = None) -> int:
    """
    Runs an admin tool, translating failures into exit codes.

    --env NAME=VALUE switches are applied before the tool body runs, so they can override configuration.

    :param usage: the usage text, without the program name.
    :param body: the tool body, returning the exit code.
    :param argv: the command line, defaults to sys.argv.
    :param prompter: the prompter to read console input with.
    :return: the exit code.
    """
    # Credential lookups are noisy
    logging.getLogger('botocore').setLevel(logging.ERROR)
    if prompter is None:
        prompter = Prompter()
    try:
        cli = CommandLineProcessor(usage, argv=argv, env_switch_name="--env")
        return loghelper.execute_with_logging_info({'tool': cli.us}, lambda: body(cli, prompter))
    except CommandLineException:
        return EXIT_USAGE
    except InvalidSequenceName as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return EXIT_USAGE
    except (StoreUnavailable, RecordExists, BeanInitializationException) as ex:
        logger.severe("Tool failed.", ex)
        print(f"Error: {ex}", file=sys.stderr)
        return EXIT_FAILURE
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.", file=sys.stderr)
        return EXIT_FAILURE
