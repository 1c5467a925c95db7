"""Document store port - CRUD keyed by collection name."""

from typing import Protocol


class DocumentStore(Protocol):
    """Port for the backing document database. Each call is independent."""

    async def create(self, collection: str, record: dict) -> dict: ...

    async def get(self, collection: str, document_id: str) -> dict | None: ...

    async def list(self, collection: str) -> list[dict]: ...

    async def update(self, collection: str, document_id: str, patch: dict) -> dict: ...

    async def delete(self, collection: str, document_id: str) -> None: ...
