"""
Expression builders for DynamoDB requests.

Attribute names never appear inline in an expression; they are always bound
through ExpressionAttributeNames placeholders so reserved words (``name``,
``status``, ``data`` ...) and odd characters are safe.
"""

from typing import Any, Dict, List, Optional, Tuple


def build_projection_expression(fields: Optional[List[str]]) -> Tuple[Optional[str], Optional[Dict[str, str]]]:
    """Build ProjectionExpression with ExpressionAttributeNames.

    Args:
        fields: List of attribute names to project, None for all attributes

    Returns:
        Tuple of (ProjectionExpression, ExpressionAttributeNames) or (None, None)

    Example:
        >>> build_projection_expression(['id', 'status'])
        ('#p0, #p1', {'#p0': 'id', '#p1': 'status'})
    """
    if not fields:
        return None, None

    expression_names = {}
    projection_parts = []

    for i, field in enumerate(fields):
        attr_name = f"#p{i}"
        expression_names[attr_name] = field
        projection_parts.append(attr_name)

    return ', '.join(projection_parts), expression_names


def build_update_expression(
    attributes: Dict[str, Dict[str, Any]]
) -> Tuple[str, Dict[str, str], Dict[str, Dict[str, Any]]]:
    """Build a SET UpdateExpression for already-converted attribute values.

    Args:
        attributes: Mapping from attribute names to tagged attribute values

    Returns:
        Tuple of (UpdateExpression, ExpressionAttributeNames, ExpressionAttributeValues)

    Example:
        >>> build_update_expression({'status': {'S': 'done'}})
        ('SET #k1 = :v1', {'#k1': 'status'}, {':v1': {'S': 'done'}})
    """
    assignments = []
    expression_names = {}
    expression_values = {}

    for i, (name, value) in enumerate(attributes.items(), start=1):
        assignments.append(f"#k{i} = :v{i}")
        expression_names[f"#k{i}"] = name
        expression_values[f":v{i}"] = value

    return "SET " + ", ".join(assignments), expression_names, expression_values
