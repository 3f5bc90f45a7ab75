"""CollectionService: the user's pokemons in the Firebase Realtime Database.

Provides:
- ``init_firebase(cfg)``: initialize (or reuse) the default Firebase app.
- ``CollectionService.list_pokemons()``: every stored name, oldest first.
- ``CollectionService.add_pokemon(name)``: append a name under a new push key.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import firebase_admin
from firebase_admin import credentials, db

from pokebattle.config import Config, load_service_account

logger = logging.getLogger(__name__)


def init_firebase(cfg: Config = Config) -> firebase_admin.App:
    """Return the default Firebase app, initializing it on first use."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        # Not initialized yet
        pass

    cred = credentials.Certificate(load_service_account(cfg))
    app = firebase_admin.initialize_app(cred, options={"databaseURL": cfg.FIREBASE_DATABASE_URL})
    logger.info("[FIREBASE] Initialized Realtime Database at %s", cfg.FIREBASE_DATABASE_URL)
    return app


def _names_in_order(data: Any) -> List[str]:
    if data is None:
        return []
    if isinstance(data, dict):
        # Push keys sort chronologically
        values = [data[k] for k in sorted(data)]
    elif isinstance(data, list):
        # Numeric keys come back as a list with holes
        values = data
    else:
        values = [data]

    names = [v for v in values if isinstance(v, str)]
    skipped = sum(1 for v in values if v is not None and not isinstance(v, str))
    if skipped:
        logger.warning("Skipped %d non-string entries in the pokemon collection", skipped)
    return names


class CollectionService:
    def __init__(self, ref: db.Reference):
        self.ref = ref

    @classmethod
    def from_config(cls, cfg: Config = Config, app: Optional[firebase_admin.App] = None) -> "CollectionService":
        app = app or init_firebase(cfg)
        return cls(db.reference(cfg.COLLECTION_PATH, app=app))

    def list_pokemons(self) -> List[str]:
        """Return the stored names in insertion order; empty when nothing is stored."""
        return _names_in_order(self.ref.get())

    def add_pokemon(self, name: str) -> str:
        """Append `name` and return the push key the database assigned."""
        new_ref = self.ref.push(name)
        logger.info("Added pokemon %s under key %s", name, new_ref.key)
        return new_ref.key
