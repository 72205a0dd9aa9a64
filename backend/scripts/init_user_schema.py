"""MongoDB schema initialization and indexes for the users collection.

Creates the unique indexes that back e-mail uniqueness and integer ids,
and seeds the id counter used by MongoUserRepository.

Run with: python -m scripts.init_user_schema
"""

import asyncio

from motor.motor_asyncio import AsyncIOMotorClient

from infrastructure.config import get_mongodb_database, get_mongodb_uri
from infrastructure.user.mongo_user_repository import USERS_COUNTER_ID

REQUIRED_INDEXES = {
    "idx_id_unique",
    "idx_email_unique",
}


async def create_user_indexes(db: object) -> None:
    """Create indexes for the users collection.

    Indexes:
    - id: Unique index (primary lookup)
    - email: Unique index (sign-up uniqueness, sign-in lookup)
    """
    users_collection = db.users  # type: ignore[attr-defined]

    await users_collection.create_index("id", unique=True, name="idx_id_unique")
    print("✓ Created unique index on id")

    await users_collection.create_index("email", unique=True, name="idx_email_unique")
    print("✓ Created unique index on email")

    # Seed the id counter without resetting an existing one
    await db.counters.update_one(  # type: ignore[attr-defined]
        {"_id": USERS_COUNTER_ID},
        {"$setOnInsert": {"seq": 0}},
        upsert=True,
    )
    print("✓ Users id counter present")


async def verify_schema(db: object) -> bool:
    """Verify that the required indexes exist."""
    indexes = await db.users.list_indexes().to_list(length=100)  # type: ignore[attr-defined]
    index_names = {idx["name"] for idx in indexes}

    missing = REQUIRED_INDEXES - index_names
    if missing:
        print(f"⚠ Missing indexes: {missing}")
        return False

    print("✓ All required indexes present")
    return True


async def main() -> None:
    mongo_uri = get_mongodb_uri() or "mongodb://localhost:27017"
    db_name = get_mongodb_database()

    client: AsyncIOMotorClient = AsyncIOMotorClient(mongo_uri)  # type: ignore
    try:
        db = client[db_name]
        print(f"Creating indexes for {db_name}.users collection...")
        await create_user_indexes(db)
        await verify_schema(db)
    finally:
        client.close()


if __name__ == "__main__":
    print("=== Users MongoDB Schema Initialization ===\n")
    asyncio.run(main())
