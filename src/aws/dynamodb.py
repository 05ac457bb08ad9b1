from decimal import Decimal
from typing import Any, Callable, Optional, Dict, Collection

from botocore.exceptions import BotoCoreError

from aws import is_not_found_exception, is_exception
from utils import exception_utils

DynamoDbRow = Dict[str, Any]
DynamoDbItem = Dict[str, Dict[str, Any]]


class PrimaryKeyViolationException(Exception):
    def __init__(self):
        super(PrimaryKeyViolationException, self).__init__("Primary key violation")


class PreconditionFailedException(Exception):
    def __init__(self):
        super(PreconditionFailedException, self).__init__("Precondition Failed")


class ResourceNotFoundException(Exception):
    def __init__(self):
        super(ResourceNotFoundException, self).__init__("Resource not found")


class ClientError(Exception):
    def __init__(self, ex: Any):
        super(ClientError, self).__init__(exception_utils.get_exception_message(ex))
        self.error_code = ex.response['Error']['Code']


class ThrottlingException(Exception):
    def __init__(self, ex: Any):
        super(ThrottlingException, self).__init__(exception_utils.get_exception_message(ex))


class ConnectionFailedException(Exception):
    def __init__(self, ex: Any):
        super(ConnectionFailedException, self).__init__(exception_utils.get_exception_message(ex))


class DynamoDbValidationException(Exception):
    """
    Raised before a request is sent, when the wrapper cannot build it.
    """

    def __init__(self, message: str):
        super(DynamoDbValidationException, self).__init__(message)


def convert_value(value: dict):
    keys = list(value.keys())
    if len(keys) > 1:
        raise ValueError("Too many keys")
    att_type = keys[0]
    att_value = value[keys[0]]

    if att_type == "S" or att_type == "BOOL" or att_type == "B":
        return att_value
    if att_type == "N":
        if "." in att_value or "e" in att_value.lower():
            return float(att_value)
        return int(att_value)
    if att_type == "M":
        return build_map(att_value)
    if att_type == "L":
        values = []
        for x in att_value:
            values.append(convert_value(x))
        return values
    if att_type == "SS":
        return list(att_value)
    if att_type == "NULL":
        return None
    raise ValueError(f"Don't know how to handle {att_type}")


def build_map(entry: dict) -> dict:
    new_record = {}
    for key, value in entry.items():
        new_record[key] = convert_value(value)
    return new_record


def _from_ddb_item(item: DynamoDbItem) -> DynamoDbRow:
    return build_map(item)


def _to_attribute_value_map(entry: DynamoDbRow) -> DynamoDbItem:
    new_record = {}
    for key, value in entry.items():
        at, av = _to_attribute_value(value)
        new_record[key] = {at: av}
    return new_record


def _to_attribute_value(value: Any):
    if value is None:
        return "NULL", True
    t = type(value)
    if t is int or t is float or t is Decimal:
        attribute_type = "N"
        attribute_value = str(value)
    elif t is str:
        attribute_type = "S"
        attribute_value = value
    elif t is bool:
        attribute_type = "BOOL"
        attribute_value = value
    elif t is list or t is tuple:
        attribute_type = "L"
        arr = []
        for x in value:
            t, v = _to_attribute_value(x)
            arr.append({t: v})
        attribute_value = arr
    elif t is dict:
        attribute_type = "M"
        attribute_value = _to_attribute_value_map(value)
    elif t is bytes:
        attribute_type = "B"
        attribute_value = value
    else:
        raise DynamoDbValidationException(f"Don't know how to handle {t}")
    return attribute_type, attribute_value


def _to_attribute_value_dict(value: Any):
    name, value = _to_attribute_value(value)
    return {name: value}


def _to_ddb_item(entry: DynamoDbRow) -> DynamoDbItem:
    return _to_attribute_value_map(entry)


def _handle_client_error(ex):
    # ValidationException from the service is a rejected request, and stays a ClientError
    code = ex.response['Error']['Code']
    if code in ("ThrottlingException", "ProvisionedThroughputExceededException", "RequestLimitExceeded"):
        raise ThrottlingException(ex)
    raise ClientError(ex)


def _handle_exception(ex: Any):
    if isinstance(ex, BotoCoreError):
        raise ConnectionFailedException(ex)

    if is_not_found_exception(ex):
        raise ResourceNotFoundException()

    type_string = str(type(ex))
    if "ConditionalCheckFailed" in type_string or is_exception(ex, 400, "ConditionalCheckFailedException"):
        raise PreconditionFailedException()

    if type_string.find("ResourceNotFoundException") > -1:
        raise ResourceNotFoundException()

    if hasattr(ex, "response") and type(getattr(ex, "response")) is dict:
        _handle_client_error(ex)

    raise ex


class _ExpressionBuilder:
    """
    Collects the attribute name and value placeholders for an expression, so attribute names that are reserved
    words (i.e. name) can be used.
    """

    def __init__(self):
        self.names: Dict[str, str] = {}
        self.values: DynamoDbItem = {}

    def name(self, attribute: str) -> str:
        placeholder = f"#n{len(self.names) + 1}"
        self.names[placeholder] = attribute
        return placeholder

    def value(self, value: Any) -> str:
        placeholder = f":v{len(self.values) + 1}"
        self.values[placeholder] = _to_attribute_value_dict(value)
        return placeholder

    def apply(self, params: dict):
        if len(self.names) > 0:
            params['ExpressionAttributeNames'] = self.names
        if len(self.values) > 0:
            params['ExpressionAttributeValues'] = self.values


def _build_existence_condition(keys: Collection[str], builder: _ExpressionBuilder, exists: bool) -> str:
    function_name = "attribute_exists" if exists else "attribute_not_exists"
    return " AND ".join(map(lambda key: f"{function_name}({builder.name(key)})", keys))


class DynamoDb:
    def __init__(self, client):
        self.__client = client

    @staticmethod
    def _execute_and_wrap(function_to_call: Callable):
        try:
            return function_to_call()
        except Exception as ex:
            _handle_exception(ex)
            return None

    def find_item(self, table_name: str,
                  keys: dict,
                  consistent: bool = False) -> Optional[DynamoDbRow]:
        record = self.__get_item(table_name, keys, consistent)
        item = record.get('Item')
        return _from_ddb_item(item) if item is not None else None

    def __get_item(self, table_name: str, keys: dict, consistent: bool) -> dict:
        params = {"TableName": table_name,
                  "Key": _to_ddb_item(keys)}
        if consistent:
            params['ConsistentRead'] = True

        return self._execute_and_wrap(lambda: self.__client.get_item(**params))

    def put_item(self, table_name: str,
                 item: DynamoDbRow,
                 key_attributes: Optional[Collection[str]] = None):
        """
        Writes an item.

        :param table_name: the table name.
        :param item: the item to write.
        :param key_attributes: when given, the write only succeeds if no item with the same key exists.
        :raises PrimaryKeyViolationException: if key_attributes were given and the item already exists.
        """
        params = {"TableName": table_name,
                  "Item": _to_ddb_item(item)}
        if key_attributes is not None and len(key_attributes) > 0:
            builder = _ExpressionBuilder()
            params['ConditionExpression'] = _build_existence_condition(key_attributes, builder, False)
            builder.apply(params)

        try:
            return self._execute_and_wrap(lambda: self.__client.put_item(**params))
        except PreconditionFailedException:
            raise PrimaryKeyViolationException()

    def update_item(self, table_name: str,
                    keys: dict,
                    item: DynamoDbRow,
                    must_exist: bool = True):
        builder = _ExpressionBuilder()
        assignments = []
        for key, value in item.items():
            if key in keys:
                continue
            assignments.append(f"{builder.name(key)} = {builder.value(value)}")
        if len(assignments) == 0:
            raise DynamoDbValidationException("Nothing to update.")

        params = {"TableName": table_name,
                  "Key": _to_ddb_item(keys),
                  "UpdateExpression": f"SET {', '.join(assignments)}"}

        if must_exist:
            params['ConditionExpression'] = _build_existence_condition(keys.keys(), builder, True)

        builder.apply(params)
        return self._execute_and_wrap(lambda: self.__client.update_item(**params))

    def increment(self, table_name: str,
                  keys: dict,
                  attribute: str,
                  delta: int = 1) -> int:
        """
        Atomically adds delta to a numeric attribute. If the item, or the attribute, does not exist, it is created
        with a base of 0.

        :return: the value of the attribute after the increment.
        """
        builder = _ExpressionBuilder()
        params = {"TableName": table_name,
                  "Key": _to_ddb_item(keys),
                  "UpdateExpression": f"ADD {builder.name(attribute)} {builder.value(delta)}",
                  "ReturnValues": "UPDATED_NEW"}
        builder.apply(params)
        resp = self._execute_and_wrap(lambda: self.__client.update_item(**params))
        return convert_value(resp['Attributes'][attribute])
