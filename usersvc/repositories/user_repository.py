"""
User Repository

Persistence operations for user documents. The storage handle is passed in
by whoever builds the application; nothing here reaches for a global.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from bson.errors import InvalidDocument
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import ConnectionFailure, PyMongoError, WriteError

from usersvc.core.exceptions import StoreUnavailableError, ValidationError
from usersvc.core.logging import LogContext, get_logger

logger = get_logger(__name__)


def to_public(document: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of a stored document with its identifier rendered as a string."""
    public = dict(document)
    if "_id" in public:
        public["_id"] = str(public["_id"])
    return public


class UserRepository(ABC):
    """Operations every user store provides."""

    @abstractmethod
    async def list_users(self) -> List[Dict[str, Any]]:
        """All stored users, in no particular order."""

    @abstractmethod
    async def create_user(self, attributes: Dict[str, Any]) -> Dict[str, Any]:
        """Stores one user and returns it with its assigned `_id`."""

    @abstractmethod
    async def ping(self) -> bool:
        """True when the store is reachable. Never raises."""


class MongoUserRepository(UserRepository):
    """Repository over a Motor collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def list_users(self) -> List[Dict[str, Any]]:
        try:
            documents = await self.collection.find({}).to_list(length=None)
        except ConnectionFailure as e:
            logger.error(f"Listing users failed, store unreachable: {e}")
            raise StoreUnavailableError(details=str(e)) from e

        logger.debug(f"Listed {len(documents)} users")
        return [to_public(document) for document in documents]

    async def create_user(self, attributes: Dict[str, Any]) -> Dict[str, Any]:
        # insert_one sets _id on the dict it is given; keep the caller's untouched
        document = dict(attributes)
        try:
            result = await self.collection.insert_one(document)
        except ConnectionFailure as e:
            logger.error(f"Creating user failed, store unreachable: {e}")
            raise StoreUnavailableError(details=str(e)) from e
        except WriteError as e:
            logger.warning(f"Store rejected user document: {e}")
            raise ValidationError(
                message="User document rejected by the data store",
                details={"code": e.code},
            ) from e
        except (OverflowError, InvalidDocument) as e:
            # Raised by the driver while encoding, e.g. integers wider than 8 bytes
            logger.warning(f"User document cannot be stored as BSON: {e}")
            raise ValidationError(
                message="User document rejected by the data store",
                details={"error": str(e)},
            ) from e

        document["_id"] = result.inserted_id
        with LogContext(user_id=str(result.inserted_id)):
            logger.info("User created")
        return to_public(document)

    async def ping(self) -> bool:
        try:
            await self.collection.database.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Database health check failed: {str(e)}")
            return False


class UnavailableUserRepository(UserRepository):
    """Stands in when no store could be configured; every call fails with 503."""

    def __init__(self, reason: str):
        self.reason = reason

    async def list_users(self) -> List[Dict[str, Any]]:
        raise StoreUnavailableError(details=self.reason)

    async def create_user(self, attributes: Dict[str, Any]) -> Dict[str, Any]:
        raise StoreUnavailableError(details=self.reason)

    async def ping(self) -> bool:
        return False
