"""SQLAlchemy implementation of KeyValueStore.

Stores every key as one row of the ``key_value_entries`` table. Each call
runs in its own short transaction, so a single ``set`` or ``remove`` is
atomic, but there is no multi-key transaction: callers that need ordering
across keys (such as cascading group deletes) issue the writes in a safe
order themselves.

Driver errors are wrapped in StorageError so callers see one failure type
regardless of backend.
"""

from __future__ import annotations

from sqlalchemy import LargeBinary, String, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database import Base, TimestampMixin, create_sessionmaker
from infrastructure.observability import DefaultKeyValueStoreProbe, KeyValueStoreProbe
from shared_kernel.storage import KeyValueStore, StorageError


class KeyValueEntryModel(Base, TimestampMixin):
    """ORM model for the key_value_entries table."""

    __tablename__ = "key_value_entries"

    key: Mapped[str] = mapped_column(String(1024), primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<KeyValueEntryModel(key={self.key}, size={len(self.value)})>"


class SqlAlchemyKeyValueStore(KeyValueStore):
    """Key-value store persisted through an async SQLAlchemy engine."""

    def __init__(
        self,
        engine: AsyncEngine,
        probe: KeyValueStoreProbe | None = None,
    ) -> None:
        """Initialize store with an async engine.

        Args:
            engine: AsyncEngine pointing at the backing database
            probe: Optional domain probe for observability
        """
        self._engine = engine
        self._sessionmaker = create_sessionmaker(engine)
        self._probe = probe or DefaultKeyValueStoreProbe(
            backend=engine.dialect.name
        )

    async def create_schema(self) -> None:
        """Create the backing table if it does not exist yet.

        Raises:
            StorageError: If the table cannot be created
        """
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(
                    Base.metadata.create_all,
                    tables=[KeyValueEntryModel.__table__],
                )
        except SQLAlchemyError as e:
            self._probe.storage_operation_failed("create_schema", None, e)
            raise StorageError(f"Failed to create key-value schema: {e}") from e

        self._probe.schema_created(KeyValueEntryModel.__tablename__)

    async def get(self, key: str) -> bytes | None:
        try:
            async with self._sessionmaker() as session:
                stmt = select(KeyValueEntryModel.value).where(
                    KeyValueEntryModel.key == key
                )
                result = await session.execute(stmt)
                value = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self._probe.storage_operation_failed("get", key, e)
            raise StorageError(f"Failed to read key '{key}': {e}", key=key) from e

        self._probe.entry_read(key, found=value is not None)
        return value

    async def set(self, key: str, value: bytes) -> None:
        try:
            async with self._sessionmaker() as session:
                async with session.begin():
                    model = await session.get(KeyValueEntryModel, key)
                    if model:
                        model.value = value
                    else:
                        session.add(KeyValueEntryModel(key=key, value=value))
        except SQLAlchemyError as e:
            self._probe.storage_operation_failed("set", key, e)
            raise StorageError(f"Failed to write key '{key}': {e}", key=key) from e

        self._probe.entry_written(key, size=len(value))

    async def remove(self, key: str) -> None:
        try:
            async with self._sessionmaker() as session:
                async with session.begin():
                    await session.execute(
                        delete(KeyValueEntryModel).where(KeyValueEntryModel.key == key)
                    )
        except SQLAlchemyError as e:
            self._probe.storage_operation_failed("remove", key, e)
            raise StorageError(f"Failed to remove key '{key}': {e}", key=key) from e

        self._probe.entry_removed(key)

    async def close(self) -> None:
        """Dispose of the engine's connection pool."""
        await self._engine.dispose()
