from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions


def is_already_exists(source: Exception) -> bool:
    return isinstance(source, api_exceptions.AlreadyExists)


def is_not_found(source: Exception) -> bool:
    return isinstance(source, api_exceptions.NotFound)


def is_service_failure(source: Exception) -> bool:
    """
    Whether the exception came from the service, the transport or the credentials (vs a programming error).
    """
    return isinstance(source, (api_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError))
