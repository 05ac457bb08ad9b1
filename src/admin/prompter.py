import sys
from datetime import datetime
from typing import Any, Callable, List, Optional, TextIO

from utils import date_utils, string_utils

InputFunction = Callable[[str], str]


class Prompter:
    """
    Line-based console prompts. Answers are trimmed, and a blank answer takes the default when there is one.
    """

    def __init__(self, input_func: InputFunction = input, output: TextIO = None):
        self.input_func = input_func
        self.output = output if output is not None else sys.stdout

    def say(self, message: str = ''):
        print(message, file=self.output)

    def prompt(self, question: str, default: Any = None) -> str:
        if default is not None:
            question = f"{question} [default: {default}]"
        answer = self.input_func(f"{question}: ").strip()
        if len(answer) == 0 and default is not None:
            return str(default)
        return answer

    def prompt_required(self, question: str) -> str:
        while True:
            answer = self.prompt(question)
            if len(answer) > 0:
                return answer
            self.say("A value is required.")

    def __prompt_number(self, question: str,
                        converter: Callable[[str], Any],
                        default: Any,
                        fallback_to_default: bool,
                        minimum: Any) -> Any:
        while True:
            answer = self.prompt(question, default)
            if len(answer) == 0:
                return None
            try:
                value = converter(answer)
            except ValueError:
                value = None
            if value is not None and (minimum is None or value >= minimum):
                return value
            if fallback_to_default:
                self.say(f"Invalid value '{answer}', using {default}.")
                return default
            if value is None:
                self.say("Please enter a valid number.")
            else:
                self.say(f"Please enter a number no less than {minimum}.")

    def prompt_int(self, question: str,
                   default: Optional[int] = None,
                   fallback_to_default: bool = False,
                   minimum: Optional[int] = None) -> Optional[int]:
        """
        Prompts for an integer.

        :param question: the question.
        :param default: the value used when the answer is blank.
        :param fallback_to_default: when True, an invalid answer takes the default instead of prompting again.
        :param minimum: the smallest valid value.
        :return: the value, or None if the answer was blank and there is no default.
        """
        return self.__prompt_number(question, int, default, fallback_to_default, minimum)

    def prompt_float(self, question: str,
                     default: Optional[float] = None,
                     minimum: Optional[float] = None) -> Optional[float]:
        return self.__prompt_number(question, float, default, False, minimum)

    def prompt_list(self, question: str) -> List[str]:
        return string_utils.split_list(self.prompt(question))

    def prompt_date(self, question: str, required: bool = False) -> Optional[datetime]:
        while True:
            answer = self.prompt(question)
            if len(answer) == 0:
                if not required:
                    return None
                self.say("A date is required.")
                continue
            try:
                return date_utils.parse_date(answer)
            except (ValueError, OverflowError):
                self.say(f"Invalid date '{answer}', expecting YYYY-MM-DD.")

    def prompt_yes(self, message: str) -> bool:
        if "?" not in message:
            message += " (yes/no)?"
        answer = self.input_func(message + " ").strip().lower()
        return answer in ("y", "yes")
