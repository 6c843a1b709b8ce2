"""Statement storage backends."""

from resourcedb.storage.allocator import StatementIdAllocator
from resourcedb.storage.local import (
    LocalStatementStore,
    StatementNotFoundError,
    StoreCapacityError,
)
from resourcedb.storage.operations import select
from resourcedb.storage.protocol import StatementStore

ResourceDatabase = LocalStatementStore

__all__ = [
    "StatementStore",
    "LocalStatementStore",
    "ResourceDatabase",
    "StatementIdAllocator",
    "StatementNotFoundError",
    "StoreCapacityError",
    "select",
]
