from .table_definition import TableDefinition

__all__ = [
    "TableDefinition",
]
