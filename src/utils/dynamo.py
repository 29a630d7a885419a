"""
DynamoDB utility functions for data access.

All records live in one table keyed by PK/SK:

    USER#<user_id>    PROFILE                      PCOS profile
    USER#<user_id>    LOG#<date>#<log_id>          daily log
    USER#<user_id>    GLIST#<list_id>              grocery list header
    GLIST#<list_id>   ITEM#<item_id>               grocery list item
"""
import os
from typing import Dict, List, Optional, Any
import boto3
from boto3.dynamodb.conditions import Key

# Singleton instance
_dynamo_instance = None

def get_dynamo() -> 'DynamoDBClient':
    """
    Get or create singleton DynamoDB client instance.

    Services call this rather than building their own client so that every
    handler shares one table resource per Lambda container.

    Returns:
        DynamoDBClient: Singleton instance of DynamoDB client

    Raises:
        EnvironmentError: If TRACKER_TABLE_NAME environment variable is not set
    """
    global _dynamo_instance
    if _dynamo_instance is None:
        try:
            table_name = os.environ['TRACKER_TABLE_NAME']
        except KeyError:
            raise EnvironmentError(
                "TRACKER_TABLE_NAME environment variable not set. "
                "This variable must be set to the DynamoDB table name."
            )
        _dynamo_instance = DynamoDBClient(table_name)
    return _dynamo_instance

class DynamoDBClient:
    """Client for interacting with DynamoDB table."""

    def __init__(self, table_name: str):
        self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)

    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put a single item into the table.

        Args:
            item: Dictionary containing item attributes

        Returns:
            Response from DynamoDB
        """
        return self.table.put_item(Item=item)

    def get_item(self, key: Dict[str, str]) -> Optional[Dict[str, Any]]:
        """
        Get a single item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Item if found, None otherwise
        """
        response = self.table.get_item(Key=key)
        return response.get('Item')

    def query_items(
        self,
        partition_key: str,
        partition_value: str,
        sort_key_prefix: Optional[str] = None,
        newest_first: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Query items by partition key, optionally restricted to a sort key prefix.

        Follows LastEvaluatedKey so callers always get the full result set.

        Args:
            partition_key: Name of partition key
            partition_value: Value of partition key
            sort_key_prefix: Optional begins_with condition on SK
            newest_first: Return items in descending sort key order

        Returns:
            List of matching items
        """
        key_condition = Key(partition_key).eq(partition_value)
        if sort_key_prefix:
            key_condition = key_condition & Key('SK').begins_with(sort_key_prefix)

        kwargs = {
            'KeyConditionExpression': key_condition,
            'ScanIndexForward': not newest_first
        }
        items: List[Dict[str, Any]] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            kwargs['ExclusiveStartKey'] = last_key

    def update_item(
        self,
        key: Dict[str, str],
        update_expression: str,
        expression_values: Dict[str, Any],
        expression_names: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Update an item in the table.

        Args:
            key: Dictionary containing partition key and sort key
            update_expression: Update expression
            expression_values: Expression attribute values
            expression_names: Optional expression attribute names

        Returns:
            Response from DynamoDB
        """
        kwargs = {
            'Key': key,
            'UpdateExpression': update_expression,
            'ExpressionAttributeValues': expression_values,
            'ReturnValues': "ALL_NEW"
        }
        if expression_names:
            kwargs['ExpressionAttributeNames'] = expression_names
        return self.table.update_item(**kwargs)

    def delete_item(self, key: Dict[str, str]) -> Dict[str, Any]:
        """
        Delete an item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Response from DynamoDB
        """
        return self.table.delete_item(Key=key)

def create_pk(user_id: str) -> str:
    """Create partition key from user ID."""
    return f"USER#{user_id}"

PROFILE_SK = "PROFILE"

def create_log_sk(date_str: str, log_id: str) -> str:
    """
    Create sort key for a daily log.

    The date comes first so a prefix query returns logs in date order.
    """
    return f"LOG#{date_str}#{log_id}"

def create_grocery_list_sk(list_id: str) -> str:
    """Create sort key for a grocery list header under its owner."""
    return f"GLIST#{list_id}"

def create_grocery_list_pk(list_id: str) -> str:
    """Create partition key holding a grocery list's items."""
    return f"GLIST#{list_id}"

def create_list_item_sk(item_id: str) -> str:
    """Create sort key for a grocery list item."""
    return f"ITEM#{item_id}"

def strip_keys(item: Dict[str, Any]) -> Dict[str, Any]:
    """Drop table key attributes before building a model from a record."""
    return {k: v for k, v in item.items() if k not in ("PK", "SK")}
