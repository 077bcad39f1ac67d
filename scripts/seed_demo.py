import asyncio

from orphanage_care.core.db import close_client, get_db
from orphanage_care.core.errors import AlreadyRegistered, DuplicateKey
from orphanage_care.core.indexes import ensure_indexes
from orphanage_care.repos.accounts import donor_directory, orphanage_directory
from orphanage_care.repos.profiles import profile_directory

DEMO_PROFILE = {
    "orphanageName": "Sunrise Home",
    "principalName": "Meera Rao",
    "city": "Hyderabad",
    "state": "Telangana",
    "address": "12 Lake View Road",
    "numChildren": 40,
    "needs": "Books, winter clothes",
    "latitude": "17.3850",
    "longitude": "78.4867",
    "portNumber": "5001",
}

async def main():
    db = get_db()
    await ensure_indexes(db)

    try:
        await donor_directory(db).register("Demo Donor", "donor@orphanagecare.local", "donor123")
        print("Donor seeded: donor@orphanagecare.local")
    except AlreadyRegistered:
        print("Donor already present")

    try:
        await orphanage_directory(db).register("Meera Rao", "head@orphanagecare.local", "head123")
        print("Orphanage head seeded: head@orphanagecare.local")
    except AlreadyRegistered:
        print("Orphanage head already present")

    try:
        await profile_directory(db).add_profile(DEMO_PROFILE)
        print("Profile seeded on port", DEMO_PROFILE["portNumber"])
    except DuplicateKey:
        print("Profile on port", DEMO_PROFILE["portNumber"], "already present")

    close_client()

if __name__ == "__main__":
    asyncio.run(main())
