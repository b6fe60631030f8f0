import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()


class DynamoDBConfig(BaseModel):
    """Configuration for the DynamoDB client owned by a table handle.

    Only SDK-level settings live here. Retries and timeouts are handed to
    botocore; the wrapper itself never retries.
    """

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    aws_session_token: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SESSION_TOKEN"),
        description="AWS session token for temporary credentials"
    )

    region_name: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_REGION"),
        description="Fallback AWS region when a handle does not name one"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=10,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of SDK retry attempts for failed requests"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Connect and read timeout in seconds"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description=(
            "Set the process-wide ddb_table logger to DEBUG when a table handle is "
            "built with this config. The level is not restored afterwards."
        )
    )

    # Conversion settings
    bool_as_text: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_BOOL_AS_TEXT", "true").lower() != "false",
        description="Return BOOL attributes as 'true'/'false' strings instead of native booleans"
    )

    @field_validator('retries')
    @classmethod
    def validate_retries(cls, v):
        """Validate retry count."""
        if v < 0:
            raise ValueError("retries must be zero or greater")
        return v

    @field_validator('max_pool_connections')
    @classmethod
    def validate_pool_size(cls, v):
        """Validate connection pool size."""
        if v < 1:
            raise ValueError("max_pool_connections must be at least 1")
        return v

    @field_validator('timeout_seconds')
    @classmethod
    def validate_timeout(cls, v):
        """Validate timeout."""
        if v <= 0:
            raise ValueError("timeout_seconds must be positive")
        return v

    @classmethod
    def from_env(cls) -> 'DynamoDBConfig':
        """Create configuration from environment variables.

        Returns:
            DynamoDBConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls, endpoint_url: str = "http://localhost:8000") -> 'DynamoDBConfig':
        """Create configuration for DynamoDB Local or LocalStack.

        Args:
            endpoint_url: Local DynamoDB endpoint

        Returns:
            DynamoDBConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            region_name="us-east-1",
            endpoint_url=endpoint_url,
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True
    )
