"""
DynamoDB Table Handle

A DDBTable is bound to one table in one region and keyed by a single string
partition key. Every operation is one request (or, for scans, one request per
page) against the low-level DynamoDB client, with values converted to and
from the attribute-value wire format by ``ddb_table.converter``.

Client ownership:
- The client is injected or created on first use, once per handle, and then
  reused for every call.
- boto3 clients are thread-safe, so a single handle can be shared between
  threads. The handle itself holds no other mutable state.
- Retries and timeouts are whatever the client was configured with; the
  handle never retries on its own.
"""

import logging
import threading
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError as PydanticValidationError

from ..config import DynamoDBConfig
from ..converter import from_wire_items, from_wire_item, to_wire_item
from ..exceptions import ConfigurationError, ItemNotFoundError, ValidationError
from ..models import TableDefinition
from ..utils import build_projection_expression, build_update_expression
from .client import create_dynamodb_client
from .errors import map_dynamodb_error

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "ddb_table"


class DDBTable:
    """
    Handle for a single DynamoDB table keyed by a string partition key.

    Example:
        table = DDBTable("us-east-1", "users", "user_id")
        table.put_item({"user_id": "u1", "name": "Ada", "admin": True})
        table.get_item("u1")  # {'user_id': 'u1', 'name': 'Ada', 'admin': 'true'}

    Note: a config with enable_debug_logging=True sets the shared "ddb_table"
    logger to DEBUG for the whole process, not just this handle. Handles built
    later without the flag leave that level as it is.
    """

    def __init__(
        self,
        region: str,
        name: str,
        partition_key_name: str,
        config: Optional[DynamoDBConfig] = None,
        client=None
    ):
        """Validate the table identity. Does not connect.

        Args:
            region: AWS region hosting the table
            name: DynamoDB table name
            partition_key_name: Name of the string partition key attribute
            config: SDK configuration (environment defaults if None)
            client: Pre-built boto3 DynamoDB client to use instead of creating one

        Raises:
            ConfigurationError: If region, name or partition_key_name is missing or empty

        Side effects:
            If config.enable_debug_logging is set, the process-wide "ddb_table"
            logger level becomes DEBUG and stays there.
        """
        try:
            self._definition = TableDefinition(
                region=region,
                name=name,
                partition_key_name=partition_key_name
            )
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err['loc']) for err in e.errors()]
            raise ConfigurationError(
                f"You must specify all values: region, name and partition key name (invalid: {', '.join(fields)})",
                fields=fields,
                original_error=e
            ) from e

        self._config = config or DynamoDBConfig()
        self._client = client
        self._client_lock = threading.Lock()

        if self._config.enable_debug_logging:
            logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)

    def __repr__(self) -> str:
        return (
            f"DDBTable(region={self.region!r}, name={self.name!r}, "
            f"partition_key_name={self.partition_key_name!r})"
        )

    @property
    def definition(self) -> TableDefinition:
        return self._definition

    @property
    def region(self) -> str:
        return self._definition.region

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def partition_key_name(self) -> str:
        return self._definition.partition_key_name

    @property
    def config(self) -> DynamoDBConfig:
        return self._config

    @property
    def client(self):
        """The boto3 DynamoDB client, created on first access and cached."""
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    self._client = create_dynamodb_client(self._config, self.region)
        return self._client

    def _key(self, partition_key_value: str) -> Dict[str, Dict[str, str]]:
        return {self.partition_key_name: {'S': partition_key_value}}

    # =========================================================================
    # Single-item operations
    # =========================================================================

    def get_item(self, partition_key_value: str) -> Dict[str, Any]:
        """
        Fetch one item by partition key.

        Args:
            partition_key_value: Partition key value

        Returns:
            The item as a generic dict (numbers as strings, booleans per
            config.bool_as_text)

        Raises:
            ItemNotFoundError: If no item has this key
            RetrievalError: If the GetItem call fails
        """
        try:
            response = self.client.get_item(
                TableName=self.name,
                Key=self._key(partition_key_value)
            )
        except (ClientError, BotoCoreError) as e:
            raise map_dynamodb_error(e, "GetItem", self.name, partition_key_value) from e

        if 'Item' not in response:
            raise ItemNotFoundError(self.name, {self.partition_key_name: partition_key_value})

        logger.debug(f"Got item from {self.name}: {partition_key_value}")
        return from_wire_item(response['Item'], self._config.bool_as_text)

    def put_item(self, item: Mapping[str, Any]) -> None:
        """
        Write an item unconditionally (insert or replace).

        Args:
            item: Generic item; must include the partition key attribute

        Raises:
            ConversionError: If the item holds a value with no wire mapping
            WriteError: If the PutItem call fails
        """
        wire_item = to_wire_item(item)
        resource_id = item.get(self.partition_key_name)

        try:
            self.client.put_item(TableName=self.name, Item=wire_item)
        except (ClientError, BotoCoreError) as e:
            raise map_dynamodb_error(e, "PutItem", self.name, resource_id) from e

        logger.info(f"Put item in {self.name}: {resource_id}")

    def update_item(self, partition_key_value: str, partial_item: Mapping[str, Any]) -> None:
        """
        Set the given attributes on an item, leaving all other attributes untouched.

        The item is created if it does not exist yet (DynamoDB UpdateItem semantics).
        A partition key attribute in partial_item is dropped when it matches
        partition_key_value, so an item read with get_item can be passed back as is.

        Args:
            partition_key_value: Partition key value
            partial_item: Attributes to set

        Raises:
            ConversionError: If a value has no wire mapping
            ValidationError: If partial_item is empty or carries a different partition key
            WriteError: If the UpdateItem call fails
        """
        if self.partition_key_name in partial_item:
            if partial_item[self.partition_key_name] != partition_key_value:
                raise ValidationError(
                    f"Cannot change partition key '{self.partition_key_name}' of {partition_key_value}",
                    errors={self.partition_key_name: 'does not match the key being updated'}
                )
            partial_item = {k: v for k, v in partial_item.items() if k != self.partition_key_name}

        wire_values = to_wire_item(partial_item)
        if not wire_values:
            raise ValidationError(
                "Update requires at least one attribute",
                errors={'partial_item': 'empty'}
            )

        update_expression, expression_names, expression_values = build_update_expression(wire_values)

        try:
            self.client.update_item(
                TableName=self.name,
                Key=self._key(partition_key_value),
                UpdateExpression=update_expression,
                ExpressionAttributeNames=expression_names,
                ExpressionAttributeValues=expression_values
            )
        except (ClientError, BotoCoreError) as e:
            raise map_dynamodb_error(e, "UpdateItem", self.name, partition_key_value) from e

        logger.info(f"Updated item in {self.name}: {partition_key_value} ({', '.join(wire_values)})")

    def delete_item(self, partition_key_value: str) -> None:
        """
        Delete an item by partition key. Deleting a missing item is a no-op.

        Raises:
            WriteError: If the DeleteItem call fails
        """
        try:
            self.client.delete_item(
                TableName=self.name,
                Key=self._key(partition_key_value)
            )
        except (ClientError, BotoCoreError) as e:
            raise map_dynamodb_error(e, "DeleteItem", self.name, partition_key_value) from e

        logger.info(f"Deleted item from {self.name}: {partition_key_value}")

    # =========================================================================
    # Scans
    # =========================================================================

    def _scan(self, **scan_kwargs) -> Dict[str, Any]:
        try:
            return self.client.scan(TableName=self.name, **scan_kwargs)
        except (ClientError, BotoCoreError) as e:
            raise map_dynamodb_error(e, "Scan", self.name) from e

    def _scan_pages(self, **scan_kwargs) -> Iterator[List[Dict[str, Any]]]:
        """Yield raw item pages until DynamoDB stops returning LastEvaluatedKey."""
        pages = 0
        while True:
            response = self._scan(**scan_kwargs)
            pages += 1
            yield response.get('Items', [])

            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                break
            scan_kwargs['ExclusiveStartKey'] = last_key

        logger.debug(f"Scan on {self.name} finished after {pages} page(s)")

    def scan_page(
        self,
        last_key: Optional[Dict[str, Any]] = None,
        page_size: Optional[int] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """
        Fetch a single Scan page.

        Args:
            last_key: Pagination token from a previous page
            page_size: Maximum items to evaluate in this page

        Returns:
            Tuple of (items, next_page_token); the token is None when the scan is done

        Raises:
            ScanError: If the Scan call fails
        """
        scan_kwargs = {}
        if page_size:
            scan_kwargs['Limit'] = page_size
        if last_key:
            scan_kwargs['ExclusiveStartKey'] = last_key

        response = self._scan(**scan_kwargs)
        items = from_wire_items(response.get('Items', []), self._config.bool_as_text)
        return items, response.get('LastEvaluatedKey')

    def scan_table(self, page_size: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Read every item in the table.

        All pages are fetched and held in memory. A failing page aborts the
        whole scan; no partial result is returned.

        Args:
            page_size: Optional Limit per Scan request

        Returns:
            List of generic items (empty for an empty table)

        Raises:
            ScanError: If any Scan page fails
        """
        scan_kwargs = {}
        if page_size:
            scan_kwargs['Limit'] = page_size

        items = []
        for page in self._scan_pages(**scan_kwargs):
            items.extend(from_wire_items(page, self._config.bool_as_text))
        return items

    def read_partition_keys_list(self, page_size: Optional[int] = None) -> List[str]:
        """
        List the partition key of every item in the table.

        Only string partition keys are returned. Items whose key attribute is
        missing or not a string are skipped, so a short list does not prove
        the table is healthy.

        Args:
            page_size: Optional Limit per Scan request

        Returns:
            List of partition key values

        Raises:
            ScanError: If any Scan page fails
        """
        projection, expression_names = build_projection_expression([self.partition_key_name])
        scan_kwargs = {
            'ProjectionExpression': projection,
            'ExpressionAttributeNames': expression_names
        }
        if page_size:
            scan_kwargs['Limit'] = page_size

        keys = []
        for page in self._scan_pages(**scan_kwargs):
            for item in page:
                key_attribute = item.get(self.partition_key_name, {})
                if 'S' in key_attribute:
                    keys.append(key_attribute['S'])
                else:
                    logger.debug(f"Skipping non-string partition key in {self.name}: {key_attribute}")
        return keys


def list_tables(
    region: str,
    config: Optional[DynamoDBConfig] = None,
    client=None
) -> List[str]:
    """
    List every table name in a region, following pagination to the end.

    Args:
        region: AWS region to list
        config: SDK configuration used when no client is given
        client: Pre-built boto3 DynamoDB client

    Returns:
        List of table names

    Raises:
        ConfigurationError: If region is empty
        ListError: If a ListTables call fails
    """
    if not region or not region.strip():
        raise ConfigurationError("You must specify a region to list tables", fields=['region'])

    client = client or create_dynamodb_client(config, region)

    tables = []
    list_kwargs = {}
    while True:
        try:
            response = client.list_tables(**list_kwargs)
        except (ClientError, BotoCoreError) as e:
            raise map_dynamodb_error(e, "ListTables") from e

        tables.extend(response.get('TableNames', []))

        last_table = response.get('LastEvaluatedTableName')
        if not last_table:
            break
        list_kwargs['ExclusiveStartTableName'] = last_table

    logger.debug(f"Listed {len(tables)} table(s) in {region}")
    return tables
