import asyncio

from orphanage_care.core.db import close_client, get_db
from orphanage_care.core.indexes import ensure_indexes
from orphanage_care.core.logging_config import setup_logging

async def main():
    setup_logging()
    await ensure_indexes(get_db())
    close_client()

if __name__ == "__main__":
    asyncio.run(main())
