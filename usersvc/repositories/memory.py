"""
In-process user store.

Same contract as the Mongo repository. Pass one to `create_app` to run the
service without a database.
"""

import copy
from typing import Any, Dict, List

import bson
from bson import ObjectId
from bson.errors import InvalidDocument

from usersvc.core.exceptions import ValidationError
from usersvc.core.logging import LogContext, get_logger
from usersvc.repositories.user_repository import UserRepository

logger = get_logger(__name__)


class InMemoryUserRepository(UserRepository):
    """
    Keeps documents in a list, in insertion order.

    Identifiers are generated with bson.ObjectId so they look exactly like
    the ones MongoDB assigns. Documents are deep-copied in and out so callers
    can never mutate stored state.
    """

    def __init__(self):
        self._documents: List[Dict[str, Any]] = []

    async def list_users(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._documents)

    async def create_user(self, attributes: Dict[str, Any]) -> Dict[str, Any]:
        object_id = str(ObjectId())
        document = {"_id": object_id}
        document.update(copy.deepcopy(attributes))
        document["_id"] = object_id
        try:
            # Refuse what MongoDB would refuse
            bson.encode(document)
        except (OverflowError, InvalidDocument) as e:
            raise ValidationError(
                message="User document rejected by the data store",
                details={"error": str(e)},
            ) from e
        self._documents.append(document)
        with LogContext(user_id=object_id):
            logger.info("User created")
        return copy.deepcopy(document)

    async def ping(self) -> bool:
        return True
