"""
Database operations - Generic document functions for the booking collections.
Each call opens its own client and releases it before returning.
"""
from typing import List, Dict, Optional
from bson import ObjectId
from bson.errors import InvalidId
from app.config.database import DatabaseConfig

class DBOperations:
    """Generic database operations for MongoDB collections"""

    def __init__(self, config: DatabaseConfig):
        self.config = config

    async def insert_one(self, collection_name: str, document: Dict) -> str:
        """Insert a new document and return the store-assigned id"""
        async with self.config.connection() as database:
            result = await database[collection_name].insert_one(document)
        return str(result.inserted_id)

    async def get_all(
        self,
        collection_name: str,
        filter_query: Dict = None,
        sort: Optional[List] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Dict]:
        """Get all documents from a collection with optional filtering"""
        async with self.config.connection() as database:
            cursor = database[collection_name].find(filter_query or {})
            if sort:
                cursor = cursor.sort(sort)
            cursor = cursor.skip(skip).limit(limit)
            return await cursor.to_list(length=limit)

    async def get_one(self, collection_name: str, filter_query: Dict) -> Optional[Dict]:
        """Get a single document by filter query"""
        async with self.config.connection() as database:
            return await database[collection_name].find_one(filter_query)

    async def update_one(self, collection_name: str, filter_query: Dict, update_data: Dict) -> int:
        """$set fields on the first matching document, returns the matched count"""
        async with self.config.connection() as database:
            result = await database[collection_name].update_one(filter_query, {"$set": update_data})
        return result.matched_count


def to_object_id(doc_id: str) -> Optional[ObjectId]:
    """Parse a string id, None when it is not a valid ObjectId"""
    try:
        return ObjectId(doc_id)
    except (InvalidId, TypeError):
        return None
