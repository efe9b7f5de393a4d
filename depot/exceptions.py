"""
Exceptions for Depot.

All errors are DepotError subclasses with a structured code for programmatic handling.
The subclass tells the caller which kind of failure it is:

    NotFound          referenced item/shipment/deletion does not exist
    Conflict          operation invalid for the current state
    ValidationFailed  malformed input, rejected before any write

Storage faults (django.db.DatabaseError and friends) are not wrapped.
"""

from typing import Any


class BaseError(Exception):
    """
    Exception with a code, a human-readable message and context data.

    Usage:
        raise BaseError('SOMETHING_WRONG', item_id=3)
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **data):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': dict(self.data),
        }


class DepotError(BaseError):
    """
    Structured exception for inventory operations.

    Usage:
        try:
            ItemStore.mark_deleted(item_id, 'Broken')
        except Conflict as e:
            if e.code == 'ALREADY_DELETED':
                ...

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
        kind: 'not_found', 'conflict' or 'validation'
    """

    kind = 'error'

    _default_messages = {
        'ITEM_NOT_FOUND': 'Item not found',
        'SHIPMENT_NOT_FOUND': 'Shipment not found',
        'DELETION_NOT_FOUND': 'Deletion record not found',
        'ALREADY_DELETED': 'Item is already deleted',
        'NOT_DELETED': 'Item is not deleted',
        'ITEM_DELETED': 'Item is deleted',
        'INSUFFICIENT_STOCK': 'Not enough stock for this shipment',
        'EMPTY_SHIPMENT': 'A shipment needs at least one item',
        'INVALID_COUNT': 'Invalid count',
        'INVALID_ITEM': 'Invalid item reference',
        'NAME_REQUIRED': 'Name is required',
        'DESTINATION_REQUIRED': 'Destination is required',
        'COMMENT_REQUIRED': 'A deletion comment is required',
    }

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result['kind'] = self.kind
        return result


class NotFound(DepotError):
    kind = 'not_found'


class Conflict(DepotError):
    kind = 'conflict'


class ValidationFailed(DepotError):
    kind = 'validation'
