"""
ddb_table

A thin wrapper over the low-level DynamoDB API: table-scoped item and scan
operations keyed by a string partition key, table listing, and conversion
between plain Python values and DynamoDB's tagged attribute-value format.
"""

from .config import DynamoDBConfig
from .converter import (
    from_attribute_value,
    from_wire_item,
    to_attribute_value,
    to_wire_item,
)
from .core import (
    DDBTable,
    create_dynamodb_client,
    list_tables,
)
from .exceptions import (
    ConfigurationError,
    ConversionError,
    DDBTableError,
    ItemNotFoundError,
    ListError,
    OperationError,
    RetrievalError,
    ScanError,
    ValidationError,
    WriteError,
)
from .models import TableDefinition

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",
    "TableDefinition",

    # Table access
    "DDBTable",
    "create_dynamodb_client",
    "list_tables",

    # Conversion
    "from_attribute_value",
    "from_wire_item",
    "to_attribute_value",
    "to_wire_item",

    # Exceptions
    "ConfigurationError",
    "ConversionError",
    "DDBTableError",
    "ItemNotFoundError",
    "ListError",
    "OperationError",
    "RetrievalError",
    "ScanError",
    "ValidationError",
    "WriteError",
]
