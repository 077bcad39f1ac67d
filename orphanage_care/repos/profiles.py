# orphanage_care/repos/profiles.py
import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from orphanage_care.repos.store import RecordStore
from orphanage_care.schemas import SUMMARY_FIELDS, OrphanageProfile

logger = logging.getLogger(__name__)


class ProfileDirectory:
    """Public orphanage listings. ``portNumber`` is the human-facing key."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def add_profile(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return await self.store.create(fields)

    async def is_port_number_unique(self, port_number: str) -> bool:
        return await self.store.find_one({"portNumber": port_number}) is None

    async def list_summaries(self) -> List[Dict[str, Any]]:
        return await self.store.find_all(SUMMARY_FIELDS)

    async def get_by_id(self, profile_id: str) -> Optional[Dict[str, Any]]:
        return await self.store.find_by_id(profile_id)

    async def get_by_port_number(self, port_number: str) -> Optional[Dict[str, Any]]:
        return await self.store.find_one({"portNumber": port_number})

    async def update_by_port_number(
        self, port_number: str, fields: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        if isinstance(fields, dict) and "portNumber" in fields and str(fields["portNumber"]) != port_number:
            logger.warning(
                "ignoring portNumber %r in update of %s; port numbers are not changed by updates",
                fields["portNumber"], port_number,
            )
        return await self.store.find_and_replace({"portNumber": port_number}, fields)


def profile_store(db: AsyncIOMotorDatabase) -> RecordStore:
    return RecordStore(db, "orphanagedetails", OrphanageProfile, unique=("portNumber",))

def profile_directory(db: AsyncIOMotorDatabase) -> ProfileDirectory:
    return ProfileDirectory(profile_store(db))
