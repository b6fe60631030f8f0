"""
Low-level DynamoDB client construction.

Table handles talk to DynamoDB through the low-level client (not the
resource API) because the converter owns the attribute-value wire format.
"""

import logging
from typing import Optional

import boto3
from botocore.config import Config

from ..config import DynamoDBConfig
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_dynamodb_client(config: Optional[DynamoDBConfig] = None, region_name: Optional[str] = None):
    """Create a boto3 DynamoDB client.

    Args:
        config: DynamoDB configuration (environment defaults if None)
        region_name: Region override; takes precedence over config.region_name

    Returns:
        boto3 DynamoDB client. boto3 clients are thread-safe, so the result
        can be shared by every thread using the same table handle.

    Raises:
        ConfigurationError: If the session or client cannot be created
    """
    config = config or DynamoDBConfig()
    region = region_name or config.region_name

    try:
        session = boto3.Session(
            aws_access_key_id=config.aws_access_key_id,
            aws_secret_access_key=config.aws_secret_access_key,
            aws_session_token=config.aws_session_token,
            region_name=region
        )

        client_kwargs = {
            'region_name': region
        }

        if config.endpoint_url:
            client_kwargs['endpoint_url'] = config.endpoint_url

        # Add retry and timeout configuration
        client_kwargs['config'] = Config(
            retries={'max_attempts': config.retries},
            max_pool_connections=config.max_pool_connections,
            read_timeout=config.timeout_seconds,
            connect_timeout=config.timeout_seconds
        )

        client = session.client('dynamodb', **client_kwargs)
        logger.debug(f"Created DynamoDB client for region {region}")
        return client
    except Exception as e:
        logger.error(f"Failed to create DynamoDB client: {e}")
        raise ConfigurationError(f"Failed to create DynamoDB client: {e}", original_error=e) from e
