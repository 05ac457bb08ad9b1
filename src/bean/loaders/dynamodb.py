from aws import AwsClient
from aws.dynamodb import DynamoDb
from bean import BeanName, inject


@inject(bean_instances=BeanName.DYNAMODB_CLIENT)
def init(client: AwsClient) -> DynamoDb:
    return DynamoDb(client)
