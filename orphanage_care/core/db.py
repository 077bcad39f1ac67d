# orphanage_care/core/db.py
from functools import lru_cache

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from orphanage_care.core.config import settings

@lru_cache(maxsize=1)
def get_client(uri: str = settings.mongodb_uri) -> AsyncIOMotorClient:
    # Cached to play nicely with uvicorn --reload
    return AsyncIOMotorClient(uri)

def get_db(uri: str = settings.mongodb_uri, name: str = settings.mongodb_db) -> AsyncIOMotorDatabase:
    return get_client(uri)[name]

def close_client(uri: str = settings.mongodb_uri) -> None:
    get_client(uri).close()
    get_client.cache_clear()
