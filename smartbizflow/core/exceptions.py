"""
Record store exceptions
"""
from typing import Optional


class StoreError(Exception):
    """Base class for record store failures"""


class StoreInitError(StoreError):
    """Data file present but unreadable / corrupt, or its directory cannot be created"""


class StoreIOError(StoreError):
    """Flushing the document to disk failed; the in-memory change was rolled back"""


class UnknownCollectionError(StoreError):
    """Collection name is not part of the document"""

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(f"Unknown collection '{collection}'")


class AppendOnlyCollectionError(StoreError):
    """Mutation attempted on an append-only collection (audit logs)"""

    def __init__(self, collection: str, operation: str):
        self.collection = collection
        self.operation = operation
        super().__init__(f"Collection '{collection}' is append-only; {operation} is not allowed")


class NotFoundError(StoreError):
    """Record with the given id does not exist in the collection"""

    def __init__(self, collection: str, record_id: Optional[str]):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"Record '{record_id}' not found in '{collection}'")
