# orphanage_care/core/indexes.py
import logging

from orphanage_care.repos.accounts import donor_store, orphanage_store
from orphanage_care.repos.profiles import profile_store

logger = logging.getLogger(__name__)

async def ensure_indexes(db):
    # Unique emails per account kind, unique port number per profile
    for store in (donor_store(db), orphanage_store(db), profile_store(db)):
        await store.ensure_indexes()
        logger.info("indexes ready on %s (unique: %s)", store.name, ", ".join(store.unique))
