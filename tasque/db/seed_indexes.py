# tasque/db/seed_indexes.py
"""
Idempotent index seeding for Tasque.

- `tasks`: compound index (email, category, order) backing the sorted owner listing.
- `users`: unique index on email (one account per address).

`create_index` is a no-op when an index with the same keys and options exists.
"""

from __future__ import annotations

from typing import List, Tuple

from pymongo import ASCENDING

from tasque.db.mongodb import get_collection

KeySpec = List[Tuple[str, int]]

TASKS_OWNER_ORDER: KeySpec = [("email", ASCENDING), ("category", ASCENDING), ("order", ASCENDING)]
USERS_EMAIL: KeySpec = [("email", ASCENDING)]


async def ensure_indexes(db) -> list[str]:
    """Crée les index applicatifs s'ils n'existent pas.

    Args:
        db (AsyncIOMotorDatabase): Base cible.

    Returns:
        list[str]: Noms des index garantis.
    """
    names = [
        await get_collection(db, "tasks").create_index(TASKS_OWNER_ORDER, name="tasks_email_category_order"),
        await get_collection(db, "users").create_index(USERS_EMAIL, name="users_email_unique", unique=True),
    ]
    return names
