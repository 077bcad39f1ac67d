# orphanage_care/repos/accounts.py
import hmac
import logging
from typing import Any, Dict

from motor.motor_asyncio import AsyncIOMotorDatabase

from orphanage_care.core.errors import AlreadyRegistered, BadCredentials, DuplicateKey, NotFound, ValidationError
from orphanage_care.repos.store import RecordStore
from orphanage_care.schemas import Donor, OrphanageIdentity

logger = logging.getLogger(__name__)


class AccountDirectory:
    """Login identities of one kind of user, keyed by email.

    Passwords are stored and compared as given; there is no hashing.
    """

    def __init__(self, store: RecordStore, name_field: str, label: str):
        self.store = store
        self.name_field = name_field
        self.label = label

    def _check_email(self, email: Any) -> None:
        # a non-string here would reach the filter as a query operator ({"$ne": null})
        if email is None or email == "":
            raise ValidationError(f"{self.store.name} validation failed: email: Path `email` is required.")
        if not isinstance(email, str):
            raise ValidationError(f"{self.store.name} validation failed: email: Input should be a valid string")

    async def register(self, name: Any, email: Any, password: Any) -> Dict[str, Any]:
        self._check_email(email)
        # fast path only; the unique index on email is what actually guards races
        if await self.store.find_one({"email": email}):
            raise AlreadyRegistered(f"{self.label} {email} is already registered")
        try:
            doc = await self.store.create(
                {self.name_field: name, "email": email, "password": password}
            )
        except DuplicateKey as exc:
            raise AlreadyRegistered(f"{self.label} {email} is already registered") from exc
        logger.info("registered %s %s", self.label.lower(), doc["_id"])
        return doc

    async def login(self, email: Any, password: Any) -> Dict[str, Any]:
        self._check_email(email)
        account = await self.store.find_one({"email": email})
        if not account:
            raise NotFound(f"{self.label} not found")
        stored = account.get("password")
        if not isinstance(stored, str) or not isinstance(password, str) or not hmac.compare_digest(
            stored.encode("utf-8"), password.encode("utf-8")
        ):
            raise BadCredentials("Incorrect password")
        return account


# ---------- Collections ----------
def donor_store(db: AsyncIOMotorDatabase) -> RecordStore:
    return RecordStore(db, "donors", Donor, unique=("email",))

def orphanage_store(db: AsyncIOMotorDatabase) -> RecordStore:
    return RecordStore(db, "orphanages", OrphanageIdentity, unique=("email",))

def donor_directory(db: AsyncIOMotorDatabase) -> AccountDirectory:
    return AccountDirectory(donor_store(db), "name", "Donor")

def orphanage_directory(db: AsyncIOMotorDatabase) -> AccountDirectory:
    return AccountDirectory(orphanage_store(db), "headName", "Orphanage")
