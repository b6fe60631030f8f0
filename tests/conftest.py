"""
Test configuration and fixtures for ddb_table.

Provides a moto-backed DynamoDB client, a ready-made table and a table handle
bound to it, plus plain Mock clients for request-shape tests.
"""

import sys
from pathlib import Path
from unittest.mock import Mock

# Add parent directory to path so we can import ddb_table
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from ddb_table import DDBTable, DynamoDBConfig

REGION = "us-east-1"
TABLE_NAME = "users"
PARTITION_KEY = "user_id"


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can reach a real AWS account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)
    monkeypatch.delenv("DYNAMODB_BOOL_AS_TEXT", raising=False)
    monkeypatch.delenv("DYNAMODB_DEBUG_LOGGING", raising=False)


@pytest.fixture
def test_config():
    """DynamoDB configuration for mocked testing."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name=REGION,
        endpoint_url=None  # Use default AWS endpoint for moto
    )


@pytest.fixture
def mock_dynamodb_client():
    """Low-level DynamoDB client backed by moto."""
    with mock_aws():
        yield boto3.client('dynamodb', region_name=REGION)


def create_table(client, table_name=TABLE_NAME, partition_key=PARTITION_KEY, key_type='S'):
    client.create_table(
        TableName=table_name,
        KeySchema=[
            {'AttributeName': partition_key, 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': partition_key, 'AttributeType': key_type}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def users_table(mock_dynamodb_client):
    """Create the users table for testing."""
    create_table(mock_dynamodb_client)
    return TABLE_NAME


@pytest.fixture
def table(mock_dynamodb_client, users_table, test_config):
    """Table handle bound to the moto users table."""
    return DDBTable(REGION, users_table, PARTITION_KEY, config=test_config, client=mock_dynamodb_client)


@pytest.fixture
def mock_client():
    """Plain Mock standing in for a boto3 DynamoDB client."""
    client = Mock()
    client.get_item.return_value = {}
    client.put_item.return_value = {}
    client.update_item.return_value = {}
    client.delete_item.return_value = {}
    client.scan.return_value = {'Items': [], 'Count': 0}
    client.list_tables.return_value = {'TableNames': []}
    return client


@pytest.fixture
def mocked_table(mock_client, test_config):
    """Table handle wired to a Mock client."""
    return DDBTable(REGION, TABLE_NAME, PARTITION_KEY, config=test_config, client=mock_client)
