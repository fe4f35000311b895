"""PostgreSQL audit entry repository implementation."""

from psycopg import AsyncConnection

from calshare.domain.entities import AuditEntry

_COLUMNS = "id, action, actor_id, target_id, status, details, created_at"


class PostgresAuditRepository:
    """Append-only audit repository. Rows are ordered by surrogate ``seq``."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, entry: AuditEntry) -> AuditEntry:
        await self._conn.execute(
            f"INSERT INTO audit_entry ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.action,
                entry.actor_id,
                entry.target_id,
                str(entry.status),
                entry.details,
                entry.created_at,
            ),
        )
        return entry

    async def list(self) -> list[AuditEntry]:
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM audit_entry ORDER BY seq")
        return [
            AuditEntry(
                id=r[0],
                action=r[1],
                actor_id=r[2],
                target_id=r[3] or "",
                status=r[4],
                details=r[5] or "",
                created_at=r[6],
            )
            for r in await cur.fetchall()
        ]
