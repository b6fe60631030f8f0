"""
Core infrastructure for DynamoDB access.

- DDBTable: table handle exposing item and scan operations
- list_tables: process-wide table listing
- create_dynamodb_client: low-level boto3 client factory
- map_dynamodb_error: botocore exception -> ddb_table exception mapping
"""

from .client import create_dynamodb_client
from .errors import map_dynamodb_error
from .table import DDBTable, list_tables

__all__ = [
    "DDBTable",
    "create_dynamodb_client",
    "list_tables",
    "map_dynamodb_error",
]
