"""
Favorites persistence.

Favorites are stored as a small JSON key-value file with a single key,
FAVORITES_KEY, holding the ordered list of favorite recipe names.

Behavior:
- load() is called once at startup. A missing, unreadable or corrupt file
  yields an empty list; this is never an error.
- save() rewrites the whole list on every change.
- Neither method raises: persistence problems are logged and the app keeps
  working with its in-memory favorites.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from recipe_ai.config import AppConfig

logger = logging.getLogger(__name__)

FAVORITES_KEY = "recipe-ai-favorites"


class FavoritesStore:
    """File-backed store for the favorites list."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else AppConfig.get_favorites_path()

    def load(self) -> List[str]:
        """
        Read the favorites list.

        Returns:
            Ordered list of recipe names; [] if the file is missing or corrupt
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.debug("Could not read favorites from %s: %s", self.path, e)
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.debug("Favorites file %s is not valid JSON: %s", self.path, e)
            return []

        names = data.get(FAVORITES_KEY) if isinstance(data, dict) else None
        if not isinstance(names, list):
            logger.debug("Favorites file %s has no list under %r", self.path, FAVORITES_KEY)
            return []

        # Drop anything that is not a name, keep order, drop duplicates
        favorites: List[str] = []
        for name in names:
            if isinstance(name, str) and name not in favorites:
                favorites.append(name)
        return favorites

    def save(self, names: List[str]) -> None:
        """
        Rewrite the whole favorites list.

        The list is written to a temporary file next to the target and moved
        into place, so readers see either the old or the new file, never a
        partial one.
        """
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                json.dump({FAVORITES_KEY: list(names)}, f, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.warning("Failed to save favorites to %s: %s", self.path, e)
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
