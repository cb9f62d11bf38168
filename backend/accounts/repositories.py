"""Repository classes for account persistence.

Collections are resolved lazily so repositories can be built before an
application context exists.
"""

from __future__ import annotations

import logging
from typing import Any, Dict
from datetime import datetime, timezone

from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from bson import ObjectId

from backend.accounts import db
from backend.accounts.presentation.protocols import AccountModel, AddAccountModel

logger = logging.getLogger(__name__)


class BaseRepository:
    """Base repository class with common database operations."""

    def __init__(self, collection_name: str):
        """Initialize repository with collection name.

        Args:
            collection_name: Name of the MongoDB collection
        """
        self.collection_name = collection_name

    @property
    def collection(self) -> Collection:
        database = db.get_db()
        return database[self.collection_name]

    def insert_one(self, document: Dict[str, Any]) -> ObjectId:
        try:
            result = self.collection.insert_one(document)
            return result.inserted_id
        except PyMongoError as e:
            logger.error(f"Error inserting document in {self.collection_name}: {e}")
            raise


class AccountMongoRepository(BaseRepository):
    def __init__(self, collection_name: str = 'accounts'):
        super().__init__(collection_name)

    def add(self, account_data: AddAccountModel) -> AccountModel:
        email = account_data.email.strip().lower()
        document = {
            'name': account_data.name,
            'email': email,
            'password': account_data.password,
            'createdAt': datetime.now(timezone.utc),
        }
        inserted_id = self.insert_one(document)
        return AccountModel(
            id=str(inserted_id),
            name=account_data.name,
            email=email,
            password=account_data.password,
        )
