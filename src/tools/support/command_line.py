import os
import sys
from typing import Optional, List, Tuple, Union

from tools.support import utils


class CommandLineException(Exception):
    def __init__(self, message: Optional[str]):
        super(CommandLineException, self).__init__(message)
        self.message = message


def set_env(name_and_value: str):
    """
    Sets the environment variable for the given name and value.

    Example: RECORD_STORE=dynamodb

    If there is no value, the variable is removed.
    i.e. AWS_PROFILE= results in the variable being removed.

    :param name_and_value: the NAME=VALUE to set.

    :raises ValueError: if the name and value is not properly formatted (key=value)
    """
    if name_and_value is None:
        return
    index = name_and_value.find('=')
    if index < 1:
        raise ValueError(f"Expecting name=value formatted (vs '{name_and_value}').")
    name = name_and_value[0:index:].strip()
    value = name_and_value[index + 1::]
    if len(value) == 0:
        os.environ.pop(name, None)
    else:
        os.environ[name] = value


class CommandLineProcessor:
    """
    Contains useful command line parsing utility methods.

    Usage problems print the message and the usage to stderr, then raise CommandLineException.
    """

    def __init__(self, usage: str,
                 argv: List[str] = None,
                 env_switch_name: str = None):
        """
        Creates a new command line reader.

        :param usage: the usage text, without the program name.
        :param argv: arguments to use instead of sys.argv
        :param env_switch_name: name of the switch setting environment variables (i.e. --env or -D, etc.)
        Example: --env AWS_PROFILE=local
        """
        self.argv = list(argv) if argv is not None else list(sys.argv)
        self.count = len(self.argv)
        self.index = 1
        self.usage = usage
        self.us = os.path.basename(self.argv[0]) if self.count > 0 else utils.get_our_file_name()
        if "--help" in self.argv:
            self.invoke_usage()
        if env_switch_name:
            self.process_env_switches(env_switch_name)

    def find_and_remove_arg_plus_int(self, name: str, default_value: int = None) -> Optional[int]:
        """
        Looks for the command line argument that matches the given name and removes it along with the following
        argument.

        :param name: the name to look for.
        :param default_value: the default value to use if not found.
        :returns: the argument after the named argument as an int if found, otherwise default_value.
        """
        result = self.find_and_remove(name, 1)
        if result:
            r = result[0]
            if r.isdigit():
                return int(r)
            self.invoke_usage(f"{name} must be specified with an integer value (vs {r}).")
        return default_value

    def find_and_remove_arg_plus_1(self, name: str, default_value: str = None) -> Optional[str]:
        """
        Looks for the command line argument that matches the given name and removes it along with the following
        argument.

        :param name: the name to look for.
        :param default_value: the default value to use if not found.
        :returns: the argument after the named argument if found, otherwise default_value.
        """
        result = self.find_and_remove(name, 1)
        if result:
            return result[0]
        return default_value

    def find_and_remove(self, name: str, extra_number_of_args: int = 0) -> Union[bool, Tuple]:
        """
        Looks for the command line argument that matches the given name and removes it.

        :param name: the name to look for.
        :param extra_number_of_args: if > 0, the number of additional arguments after the argument found is also
        removed.
        :returns: True if found and extra_number_of_args is 0. If extra_number_of_args is > 0, then a tuple of the
        extra args removed. False if the argument was not found.
        """
        remove_at = None
        for i in range(self.index, len(self.argv)):
            if self.argv[i] == name:
                remove_at = i
                break

        if remove_at is None:
            return False
        counter = 0
        captured = [] if extra_number_of_args > 0 else True
        while self.count > remove_at:
            v = self.argv[remove_at]
            del self.argv[remove_at]
            self.count -= 1
            if counter > 0:
                captured.append(v)
            if counter == extra_number_of_args:
                break
            counter += 1

        if extra_number_of_args > 0:
            if len(captured) != extra_number_of_args:
                self.invoke_usage(f"{name} requires a value.")
            return tuple(captured)
        return captured

    def process_env_switches(self, switch_name: str = "--env"):
        """
        A convenience method to look for --env NAME=VALUE settings on the command line and apply them
        to the os.environ dictionary.

        :param switch_name: The switch name (i.e. --env, -D, etc)
        """
        while True:
            value = self.find_and_remove_arg_plus_1(switch_name)
            if value is None:
                break
            try:
                set_env(value)
            except ValueError as ex:
                self.invoke_usage(f"Invalid {switch_name} setting: {ex}")

    def invoke_usage(self, message: str = None):
        """
        Prints the given message and the usage, then raises CommandLineException.

        :param message: the message to include with the usage.
        """
        if message is not None:
            print(message, file=sys.stderr)
        print(f"Usage: {self.us} {self.usage}", file=sys.stderr)
        raise CommandLineException(message)

    def get_next_arg(self, expected_name: str = None) -> str:
        """
        Returns the next argument.  If there are no more arguments, the usage is invoked.

        :param expected_name: the name of the expected argument.
        :return: the next argument
        """
        if self.index == self.count:
            if expected_name is not None:
                self.invoke_usage(f"Expected '{expected_name}' to be passed to the command line")
            self.invoke_usage()
        arg = self.argv[self.index]
        self.index += 1
        return arg

    def assert_no_more(self):
        """
        Used to ensure there are no more command line arguments.  If there are, the usage is invoked with
        the next argument.
        """
        if self.has_more():
            arg = self.get_next_arg()
            self.invoke_usage(f"Unexpected argument '{arg}'")

    def has_more(self) -> bool:
        return self.index < self.count
