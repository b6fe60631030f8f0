from pydantic import BaseModel, ConfigDict, Field, field_validator


class TableDefinition(BaseModel):
    """Identity of a DynamoDB table handle: where it lives and how items are keyed."""

    region: str = Field(..., description="AWS region hosting the table")
    name: str = Field(..., description="DynamoDB table name")
    partition_key_name: str = Field(..., description="Name of the partition key attribute")

    @field_validator('region', 'name', 'partition_key_name')
    @classmethod
    def validate_not_empty(cls, v, info):
        """Reject empty and whitespace-only values."""
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} must be a non-empty string")
        return v

    model_config = ConfigDict(
        frozen=True
    )
