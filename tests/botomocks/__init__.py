from typing import Dict, Any

from botomocks.exceptions import AwsResourceNotFoundResponseException, AwsValidationResponseException


def raise_not_found(operation_name: str, message: str):
    raise AwsResourceNotFoundResponseException(operation_name, message)


def raise_validation(operation_name: str, message: str):
    raise AwsValidationResponseException(operation_name, message)


def assert_empty(props: Dict[str, Any]):
    if len(props) != 0:
        raise AssertionError(f"Unrecognized properties: {','.join(props.keys())}")
