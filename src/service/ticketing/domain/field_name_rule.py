from typing import Any, Dict

from src.platform.exception.exceptions import DomainError


def validate_field_names(fields: Dict[str, Any]) -> None:
    """
    Client-supplied keys must be plain top-level field names.

    A dotted key (`tickets.available`) is a path under `$set` and would skip the
    entity validation of the parent field; a `$` key is an operator.
    """
    for key in fields:
        if not isinstance(key, str) or not key or '.' in key or key.startswith('$'):
            raise DomainError(f'Invalid field name: {key}')
