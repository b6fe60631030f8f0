"""
Tests for low-level client construction (core/client.py).
"""

from unittest.mock import Mock, patch

import pytest

from ddb_table.config import DynamoDBConfig
from ddb_table.core.client import create_dynamodb_client
from ddb_table.exceptions import ConfigurationError


@pytest.fixture
def config():
    return DynamoDBConfig(
        aws_access_key_id="fake_key",
        aws_secret_access_key="fake_secret",
        aws_session_token=None,
        region_name="us-east-1",
        endpoint_url="http://localhost:8000",
        retries=5,
        max_pool_connections=20,
        timeout_seconds=12.0
    )


class TestCreateDynamoDBClient:

    def test_session_and_client_arguments(self, config):
        with patch('boto3.Session') as mock_session_class:
            mock_session = Mock()
            mock_session_class.return_value = mock_session

            result = create_dynamodb_client(config)

            mock_session_class.assert_called_once_with(
                aws_access_key_id="fake_key",
                aws_secret_access_key="fake_secret",
                aws_session_token=None,
                region_name="us-east-1"
            )
            args, kwargs = mock_session.client.call_args
            assert args == ('dynamodb',)
            assert kwargs['region_name'] == "us-east-1"
            assert kwargs['endpoint_url'] == "http://localhost:8000"
            assert kwargs['config'].retries == {'max_attempts': 5}
            assert kwargs['config'].max_pool_connections == 20
            assert kwargs['config'].read_timeout == 12.0
            assert kwargs['config'].connect_timeout == 12.0
            assert result is mock_session.client.return_value

    def test_region_override(self, config):
        with patch('boto3.Session') as mock_session_class:
            create_dynamodb_client(config, region_name="eu-central-1")

            assert mock_session_class.call_args.kwargs['region_name'] == "eu-central-1"
            client_kwargs = mock_session_class.return_value.client.call_args.kwargs
            assert client_kwargs['region_name'] == "eu-central-1"

    def test_no_endpoint_by_default(self):
        config = DynamoDBConfig(region_name="us-east-1", endpoint_url=None)

        with patch('boto3.Session') as mock_session_class:
            create_dynamodb_client(config)

            client_kwargs = mock_session_class.return_value.client.call_args.kwargs
            assert 'endpoint_url' not in client_kwargs

    def test_failure_raises_configuration_error(self, config):
        with patch('boto3.Session') as mock_session_class:
            mock_session_class.side_effect = Exception("Connection failed")

            with pytest.raises(ConfigurationError, match="Failed to create DynamoDB client"):
                create_dynamodb_client(config)

    def test_real_client_region(self, config):
        client = create_dynamodb_client(config, region_name="eu-west-2")

        assert client.meta.region_name == "eu-west-2"
        assert client.meta.endpoint_url == "http://localhost:8000"
