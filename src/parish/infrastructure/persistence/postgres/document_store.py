"""PostgreSQL document store - JSONB records keyed by collection name."""

from uuid import UUID, uuid4

from psycopg.types.json import Jsonb
from psycopg_pool import AsyncConnectionPool

from parish.domain.exceptions import NotFound


def _parse_id(document_id: str) -> UUID | None:
    try:
        return UUID(str(document_id))
    except ValueError:
        return None


def _with_id(row: tuple) -> dict:
    return {**row[1], "id": str(row[0])}


class PostgresDocumentStore:
    """Document store over a single document table.

    Every call runs on its own pooled connection and commits on return, so
    callers never share a transaction across records.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def create(self, collection: str, record: dict) -> dict:
        """Insert record, return it with its new id."""
        data = {k: v for k, v in record.items() if k != "id"}
        async with self._pool.connection() as conn:
            cur = await conn.execute(
                "INSERT INTO document (id, collection, data) VALUES (%s, %s, %s) "
                "RETURNING id, data",
                (uuid4(), collection, Jsonb(data)),
            )
            row = await cur.fetchone()
        return _with_id(row)

    async def get(self, collection: str, document_id: str) -> dict | None:
        doc_id = _parse_id(document_id)
        if doc_id is None:
            return None
        async with self._pool.connection() as conn:
            cur = await conn.execute(
                "SELECT id, data FROM document WHERE collection = %s AND id = %s",
                (collection, doc_id),
            )
            row = await cur.fetchone()
        return _with_id(row) if row else None

    async def list(self, collection: str) -> list[dict]:
        """All records in collection, oldest insert first."""
        async with self._pool.connection() as conn:
            cur = await conn.execute(
                "SELECT id, data FROM document WHERE collection = %s ORDER BY created_at, id",
                (collection,),
            )
            rows = await cur.fetchall()
        return [_with_id(r) for r in rows]

    async def update(self, collection: str, document_id: str, patch: dict) -> dict:
        """Merge patch into the stored record."""
        doc_id = _parse_id(document_id)
        if doc_id is None:
            raise NotFound(collection, document_id)
        data = {k: v for k, v in patch.items() if k != "id"}
        async with self._pool.connection() as conn:
            cur = await conn.execute(
                "UPDATE document SET data = data || %s, updated_at = now() "
                "WHERE collection = %s AND id = %s RETURNING id, data",
                (Jsonb(data), collection, doc_id),
            )
            row = await cur.fetchone()
        if not row:
            raise NotFound(collection, document_id)
        return _with_id(row)

    async def delete(self, collection: str, document_id: str) -> None:
        doc_id = _parse_id(document_id)
        if doc_id is None:
            raise NotFound(collection, document_id)
        async with self._pool.connection() as conn:
            cur = await conn.execute(
                "DELETE FROM document WHERE collection = %s AND id = %s",
                (collection, doc_id),
            )
            deleted = cur.rowcount
        if not deleted:
            raise NotFound(collection, document_id)
