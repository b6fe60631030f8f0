"""
Mapping of botocore failures onto ddb_table exceptions.

Which exception class is raised depends on the operation that failed, never
on the error code: a ResourceNotFoundException during GetItem is a failed
retrieval (the table is missing), not an absent item. The error code only
feeds the ``retryable`` hint.
"""

import logging
from typing import Optional, Union

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from ..exceptions import (
    ListError,
    OperationError,
    RetrievalError,
    ScanError,
    WriteError,
)

logger = logging.getLogger(__name__)

OPERATION_ERRORS = {
    'GetItem': RetrievalError,
    'PutItem': WriteError,
    'UpdateItem': WriteError,
    'DeleteItem': WriteError,
    'Scan': ScanError,
    'ListTables': ListError,
}

RETRYABLE_ERROR_CODES = {
    # Throttling
    'ProvisionedThroughputExceededException',
    'RequestLimitExceeded',
    'ThrottlingException',
    'TooManyRequestsException',
    # Service side
    'InternalServerError',
    'ServiceUnavailable',
    'ServiceUnavailableException',
    'InternalFailure',
    # Timeouts
    'RequestTimeoutException',
    'RequestExpiredException',
    'TransactionInProgressException',
}

# Codes that are expected and not retryable; anything outside both sets is logged
KNOWN_ERROR_CODES = RETRYABLE_ERROR_CODES | {
    'ResourceNotFoundException',
    'ValidationException',
    'ConditionalCheckFailedException',
    'ItemCollectionSizeLimitExceededException',
    'TransactionConflictException',
    'AccessDeniedException',
    'UnrecognizedClientException',
    'ExpiredTokenException',
    'MissingAuthenticationTokenException',
    'InvalidSignatureException',
    'SerializationException',
}

RETRYABLE_BOTOCORE_ERRORS = (
    EndpointConnectionError,
    ConnectionClosedError,
    ConnectTimeoutError,
    ReadTimeoutError,
)


def map_dynamodb_error(
    error: Union[ClientError, BotoCoreError],
    operation: str,
    table_name: Optional[str] = None,
    resource_id: Optional[str] = None
) -> OperationError:
    """Map a botocore exception to the ddb_table exception for an operation.

    Args:
        error: ClientError from the service or BotoCoreError from the transport
        operation: The DynamoDB API operation that failed (e.g. "GetItem")
        table_name: The DynamoDB table name (None for ListTables)
        resource_id: Optional partition key value for context

    Returns:
        RetrievalError, WriteError, ScanError or ListError
        (OperationError for operations outside that set)
    """
    if isinstance(error, ClientError):
        error_code = error.response.get('Error', {}).get('Code', 'Unknown')
        error_message = error.response.get('Error', {}).get('Message', str(error))
        retryable = error_code in RETRYABLE_ERROR_CODES
        if error_code not in KNOWN_ERROR_CODES:
            logger.warning(f"Unknown DynamoDB error code '{error_code}' during {operation}")
    else:
        error_code = type(error).__name__
        error_message = str(error)
        retryable = isinstance(error, RETRYABLE_BOTOCORE_ERRORS)

    context = operation
    if table_name:
        context += f" on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    error_class = OPERATION_ERRORS.get(operation, OperationError)
    return error_class(
        f"{context}: {error_message}",
        operation=operation,
        table_name=table_name,
        error_code=error_code,
        retryable=retryable,
        original_error=error
    )
