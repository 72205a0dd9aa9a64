"""MongoDB User Repository implementation."""

from datetime import timezone
from typing import Any, Dict, List, Optional

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import EmailInUseError, UserNotFoundError

USERS_COUNTER_ID = "users"


class MongoUserRepository(IUserRepository):
    """MongoDB implementation of User repository.

    Documents in the `users` collection:
    - id: Integer user id (unique index)
    - email: Normalized e-mail (unique index)
    - password: "<salt>.<hash>"
    - created_at / updated_at: UTC timestamps

    Integer ids come from an atomic `$inc` on the `counters` collection,
    so concurrent sign-ups never share an id.

    Examples:
        >>> repo = MongoUserRepository(db)
        >>> user = await repo.add(User.create(Email("a@b.io"), "salt.hash"))
        >>> found = await repo.find_by_id(user.id)
    """

    def __init__(self, db: Any) -> None:
        """Initialize repository with a motor database.

        Args:
            db: AsyncIOMotorDatabase (or compatible mock)
        """
        self.db = db
        self.collection = db.users
        self.counters = db.counters

    async def add(self, user: User) -> User:
        """Insert a new user with the next counter value as id.

        Raises:
            EmailInUseError: If the unique e-mail index rejects the insert
        """
        if user.id is not None:
            raise ValueError(f"User already persisted with id {user.id}")

        user.id = await self._next_id()
        try:
            await self.collection.insert_one(self._entity_to_document(user))
        except DuplicateKeyError as e:
            user.id = None
            if not self._is_email_conflict(e):
                raise
            raise EmailInUseError(str(user.email)) from e
        return user

    async def save(self, user: User) -> None:
        """Overwrite the stored document of an existing user.

        Raises:
            UserNotFoundError: If no document has this id
            EmailInUseError: If the new e-mail belongs to another document
        """
        try:
            result = await self.collection.replace_one(
                {"id": user.id}, self._entity_to_document(user), upsert=False
            )
        except DuplicateKeyError as e:
            if not self._is_email_conflict(e):
                raise
            raise EmailInUseError(str(user.email)) from e

        if result.matched_count == 0:
            raise UserNotFoundError(user.id)

    async def find_by_id(self, user_id: int) -> Optional[User]:
        document = await self.collection.find_one({"id": user_id})

        if not document:
            return None

        return self._document_to_entity(document)

    async def find_by_email(self, email: Email) -> List[User]:
        cursor = self.collection.find({"email": str(email)})
        documents = await cursor.to_list(length=None)
        return [self._document_to_entity(doc) for doc in documents]

    async def delete(self, user_id: int) -> bool:
        """Delete user by id.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        result = await self.collection.delete_one({"id": user_id})

        if result.deleted_count == 0:
            raise UserNotFoundError(user_id)

        return True

    @staticmethod
    def _is_email_conflict(error: DuplicateKeyError) -> bool:
        """True unless the server reports a key other than email.

        Ids come from the counter, so a collision reported without
        keyPattern is taken as an e-mail one.
        """
        key_pattern = (error.details or {}).get("keyPattern") or {}
        return not key_pattern or "email" in key_pattern

    async def _next_id(self) -> int:
        counter = await self.counters.find_one_and_update(
            {"_id": USERS_COUNTER_ID},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter["seq"])

    def _entity_to_document(self, user: User) -> Dict[str, Any]:
        return {
            "id": user.id,
            "email": str(user.email),
            "password": user.password,
            "created_at": user.created_at,
            "updated_at": user.updated_at,
        }

    def _document_to_entity(self, document: Dict[str, Any]) -> User:
        """Convert MongoDB document to User entity.

        BSON dates come back naive; they are stored as UTC.
        """
        created_at = document["created_at"]
        updated_at = document.get("updated_at", created_at)
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        if updated_at.tzinfo is None:
            updated_at = updated_at.replace(tzinfo=timezone.utc)

        return User(
            id=int(document["id"]),
            email=Email(document["email"]),
            password=document["password"],
            created_at=created_at,
            updated_at=updated_at,
        )
