import random
import string
from typing import Optional, List

CODE_CHARACTERS = string.ascii_uppercase + string.digits


def format_identifier(prefix: str, value: int, digits: int = 4) -> str:
    """
    Formats a human-readable identifier, such as COURSE0001.

    :param prefix: the prefix.
    :param value: the numeric value. It is never truncated if it is wider than the padding.
    :param digits: the number of digits to zero-pad the value to.
    :return: the identifier.
    """
    return f"{prefix}{str(value).rjust(digits, '0')}"


def split_list(value: Optional[str], delimiter: str = ',') -> List[str]:
    """
    Splits a delimited string, trimming each entry and dropping empty ones.

    :param value: the string to split.
    :param delimiter: the delimiter.
    :return: the list of entries, empty if value is None or blank.
    """
    if value is None:
        return []
    return [entry.strip() for entry in value.split(delimiter) if len(entry.strip()) > 0]


def generate_code(length: int = 6) -> str:
    """
    Generates a random code of uppercase letters and digits.
    """
    return ''.join(random.choice(CODE_CHARACTERS) for _ in range(length))

