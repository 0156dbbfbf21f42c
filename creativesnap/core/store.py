# ============================================================================
# FILE: creativesnap/core/store.py
# ============================================================================
"""Document store handle - owns the Mongo client for the app's lifetime"""

from typing import Any, Awaitable, Callable, Optional, TypeVar
import logging

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorClientSession,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from creativesnap.core.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Store:
    """Named collections of one logical database plus the transaction runner.

    Built once at startup, kept on ``app.state`` and closed at shutdown.
    """

    USERS = "users"
    CLASSES = "classes"
    CARDS = "cards"
    PAYMENTS = "payments"

    def __init__(self, client: AsyncIOMotorClient, database_name: str):
        self.client = client
        self.db: AsyncIOMotorDatabase = client[database_name]
        logger.debug(f"Store bound to database {database_name}")

    @classmethod
    def from_settings(cls) -> "Store":
        return cls(AsyncIOMotorClient(settings.mongo_uri), settings.DATABASE_NAME)

    @property
    def users(self) -> AsyncIOMotorCollection:
        return self.db[self.USERS]

    @property
    def classes(self) -> AsyncIOMotorCollection:
        return self.db[self.CLASSES]

    @property
    def cards(self) -> AsyncIOMotorCollection:
        return self.db[self.CARDS]

    @property
    def payments(self) -> AsyncIOMotorCollection:
        return self.db[self.PAYMENTS]

    async def ping(self) -> bool:
        """Round-trip to the server; False when it cannot be reached"""
        try:
            await self.client.admin.command("ping")
            return True
        except Exception as e:
            logger.warning(f"Store ping failed: {e}")
            return False

    async def ensure_indexes(self) -> None:
        """A user's email is unique; concurrent upserts by email cannot duplicate it"""
        await self.users.create_index("email", unique=True)
        logger.info("✓ Store indexes ensured")

    async def run_transaction(
        self,
        callback: Callable[[Optional[AsyncIOMotorClientSession]], Awaitable[T]],
    ) -> T:
        """Run ``callback(session)`` inside one multi-document transaction.

        Transient transaction errors are retried by the driver; any other
        exception aborts the transaction and propagates.
        """
        async with await self.client.start_session() as session:
            return await session.with_transaction(callback)

    def close(self) -> None:
        self.client.close()
        logger.info("✓ Database client closed")


def result_to_dict(result: Any) -> dict:
    """Shape a driver write result the way the driver's JSON clients report it"""
    data = {"acknowledged": bool(getattr(result, "acknowledged", True))}
    if hasattr(result, "inserted_id"):
        data["insertedId"] = str(result.inserted_id)
    if hasattr(result, "matched_count"):
        data["matchedCount"] = result.matched_count
        data["modifiedCount"] = result.modified_count
        upserted_id = result.upserted_id
        data["upsertedId"] = str(upserted_id) if upserted_id is not None else None
    if hasattr(result, "deleted_count"):
        data["deletedCount"] = result.deleted_count
    return data
