"""User lookup and registration over the key-value store."""

import json
import logging
import uuid

from .errors import Malformed
from .models import Sender, TelegramInterface, User
from .store import KVStore

logger = logging.getLogger(__name__)


def telegram_index_key(telegram_id: int) -> str:
    """Key mapping a Telegram user id to a uid."""
    return f"interfaces:telegram:{telegram_id}"


def user_key(uid: str) -> str:
    return f"users:{uid}"


def create_user() -> User:
    """Create a user with a fresh unique identifier."""
    return User(uid=str(uuid.uuid4()))


class UserDirectory:
    """Finds users by chat-platform identity, registering them on first contact."""

    def __init__(self, store: KVStore) -> None:
        self.store = store

    async def get(self, uid: str) -> User | None:
        """Load a user record, or None if it does not exist."""
        key = user_key(uid)
        raw = await self.store.get(key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise Malformed(key, f"invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise Malformed(key, "expected an object")
        try:
            return User.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise Malformed(key, f"invalid user: {e}") from e

    async def save(self, user: User) -> None:
        await self.store.put(user_key(user.uid), json.dumps(user.to_dict()))

    async def lookup_telegram(self, sender: Sender) -> User:
        """Resolve the user behind a Telegram sender.

        A new user is created when the Telegram id is unknown. Missing names
        and interface details are filled from the sender; the record is only
        written back when something changed.
        """
        index_key = telegram_index_key(sender.id)
        changed = False
        user: User | None = None

        uid = await self.store.get(index_key)
        if uid is not None:
            user = await self.get(uid)
            if user is None:
                logger.warning(f"Telegram index points at missing user {uid}")
                user = User(uid=uid)
                changed = True
        else:
            user = create_user()
            await self.store.put(index_key, user.uid)
            changed = True
            logger.info(f"Registered user {user.uid} for telegram id {sender.id}")

        if not user.firstname and sender.first_name:
            user.firstname = sender.first_name
            changed = True
        if not user.lastname and sender.last_name:
            user.lastname = sender.last_name
            changed = True
        if user.telegram is None:
            user.telegram = TelegramInterface(
                id=sender.id,
                chat=sender.chat_id,
                username=sender.username,
            )
            changed = True

        if changed:
            await self.save(user)
        return user
