"""Endpoint handlers composed by the Wasender facade."""

from .contacts_handler import WasenderContactsHandler
from .groups_handler import WasenderGroupsHandler
from .sessions_handler import WasenderSessionsHandler

__all__ = [
    "WasenderContactsHandler",
    "WasenderGroupsHandler",
    "WasenderSessionsHandler",
]
