import uuid
from typing import Dict, Any, Optional


class AwsExceptionResponseException(Exception):
    def __init__(self, operation_name: Optional[str], status_code: int, error_code: str,
                 error_message: str,
                 **kwargs):
        req_id = str(uuid.uuid4())
        error_node = {
            'Message': error_message,
            'Code': error_code
        }
        kwargs.update(error_node)
        record = {
            'Error': error_node,
            'ResponseMetadata': {
                'RequestId': req_id,
                'HTTPStatusCode': status_code,
                'HTTPHeaders': {
                    'x-amzn-request-id': req_id,
                    'content-type': "application/x-amz-json-1.0",
                    'connection': "close"
                },
                'RetryAttempts': 0
            },
            'Message': error_message
        }
        if operation_name is not None:
            record['operation_name'] = operation_name
        self.response = record
        super(AwsExceptionResponseException, self).__init__(error_message)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.__dict__)


class AwsResourceNotFoundResponseException(AwsExceptionResponseException):
    def __init__(self, operation_name: str, message: str):
        super(AwsResourceNotFoundResponseException, self).__init__(operation_name=operation_name,
                                                                   status_code=400,
                                                                   error_code="ResourceNotFoundException",
                                                                   error_message=message)


class AwsValidationResponseException(AwsExceptionResponseException):
    def __init__(self, operation_name: str, message: str):
        super(AwsValidationResponseException, self).__init__(operation_name=operation_name,
                                                             status_code=400,
                                                             error_code="ValidationException",
                                                             error_message=message)


class AwsThrottlingResponseException(AwsExceptionResponseException):
    def __init__(self, operation_name: str):
        super(AwsThrottlingResponseException, self).__init__(operation_name=operation_name,
                                                             status_code=400,
                                                             error_code="ProvisionedThroughputExceededException",
                                                             error_message="Rate exceeded.")


class AwsAccessDeniedResponseException(AwsExceptionResponseException):
    def __init__(self, operation_name: str):
        super(AwsAccessDeniedResponseException, self).__init__(operation_name=operation_name,
                                                               status_code=400,
                                                               error_code="AccessDeniedException",
                                                               error_message="Access denied.")


class ConditionalCheckFailedException(AwsExceptionResponseException):
    def __init__(self, operation_name: str):
        super(ConditionalCheckFailedException, self).__init__(operation_name=operation_name,
                                                              status_code=400,
                                                              error_code="ConditionalCheckFailedException",
                                                              error_message="The conditional request failed")
