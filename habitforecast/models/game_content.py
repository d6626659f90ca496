# habitforecast/models/game_content.py

# ─── Model ────────────────────────────────────────────────────────────────────
#          Habitica Static Game Content Models & Resolver
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Models for static content items (gear, quests) and `ContentResolver`, which
hydrates the identifiers embedded in a user payload from a content catalog.

The catalog is the `data` object of Habitica's `/content` endpoint, supplied
as a dict or read from a JSON file saved earlier. Nothing here talks to the
network.
"""

# SECTION: IMPORTS
from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import emoji_data_python
from pydantic import Field, field_validator

from habitforecast.exceptions import ContentCatalogError
from habitforecast.helpers._json import load_json, unwrap_envelope
from habitforecast.helpers._logger import log
from habitforecast.helpers._pydantic import HabitForecastBaseModel, create_from_dict

from .stats import StatPoints

GEAR_SECTIONS = ("equipped", "costume")


# SECTION: PYDANTIC MODELS FOR CONTENT ITEMS


# KLASS: GearItem
class GearItem(StatPoints):
    """A gear definition from `content.gear.flat`.

    `owner_class` is the catalog's `klass` ('warrior', 'wizard', ... but also
    'special', 'armoire', 'base'); `special_class` is set on some special
    items. Either one equal to the wearer's class grants the class bonus.
    """

    key: str = ""
    text: str = ""
    owner_class: str | None = Field(None, alias="klass")
    special_class: str | None = Field(None, alias="specialClass")

    @field_validator("text", mode="before")
    @classmethod
    def parse_text_emoji(cls, v: Any) -> str:
        if isinstance(v, str):
            return emoji_data_python.replace_colons(v).strip()
        return ""

    def matches_class(self, class_id: str) -> bool:
        return self.owner_class == class_id or self.special_class == class_id


# KLASS: QuestBoss
class QuestBoss(HabitForecastBaseModel):
    name: str = ""
    hp: float = 0.0
    strength: float = Field(..., alias="str", description="Scales party damage from missed dailies.")


# KLASS: Quest
class Quest(HabitForecastBaseModel):
    """A quest definition from `content.quests`."""

    key: str = ""
    text: str = ""
    category: str | None = None
    boss: QuestBoss | None = None

    @field_validator("text", mode="before")
    @classmethod
    def parse_text_emoji(cls, v: Any) -> str:
        if isinstance(v, str):
            return emoji_data_python.replace_colons(v).strip()
        return ""

    @property
    def is_boss_quest(self) -> bool:
        return self.boss is not None


# SECTION: CONTENT RESOLVER


# KLASS: ContentResolver
class ContentResolver:
    """Looks up gear and quests by key and hydrates raw user payloads."""

    def __init__(self, catalog: dict[str, Any] | None = None):
        if catalog is not None and not isinstance(catalog, dict):
            raise ContentCatalogError(f"Content catalog must be a dict, got {type(catalog).__name__}")
        self._catalog: dict[str, Any] = catalog or {}
        self._gear_flat: dict[str, Any] = self._catalog.get("gear", {}).get("flat", {}) if self._catalog else {}
        self._quests: dict[str, Any] = self._catalog.get("quests", {}) if self._catalog else {}
        if self._catalog:
            log.debug(f"Content catalog loaded: {len(self._gear_flat)} gear items, {len(self._quests)} quests")

    @classmethod
    def from_json(cls, path: str | Path) -> ContentResolver:
        """Loads a saved `/content` response (enveloped or bare)."""
        data = load_json(path)
        if data is None:
            raise ContentCatalogError(f"Could not read content catalog from '{path}'", details=str(path))
        data = unwrap_envelope(data)
        if not isinstance(data, dict) or not ("gear" in data or "quests" in data):
            raise ContentCatalogError(f"'{path}' does not look like a Habitica content payload", details=str(path))
        return cls(data)

    @property
    def is_loaded(self) -> bool:
        return bool(self._catalog)

    def lookup_gear(self, key: str) -> GearItem | None:
        raw = self._gear_flat.get(key)
        if raw is None:
            return None
        return create_from_dict(GearItem, {**raw, "key": key}, prefix=f"gear.flat.{key}")

    def lookup_quest(self, key: str) -> Quest | None:
        raw = self._quests.get(key)
        if raw is None:
            return None
        return create_from_dict(Quest, {**raw, "key": key}, prefix=f"quests.{key}")

    def hydrate_user(self, raw_user: dict[str, Any]) -> dict[str, Any]:
        """Returns a copy of `raw_user` with gear and quest keys replaced by catalog entries.

        Without a loaded catalog the identifiers are left as they are. With a
        catalog, a gear key it does not know becomes an empty slot (None).

        Entries go through `lookup_gear`/`lookup_quest`, so a malformed catalog
        entry raises MissingFieldError named by its catalog path.
        """
        data = copy.deepcopy(raw_user)
        if not self.is_loaded:
            log.warning("No content catalog loaded; gear and quest identifiers left unresolved")
            return data

        gear = (data.get("items") or {}).get("gear") or {}
        for section_name in GEAR_SECTIONS:
            section = gear.get(section_name)
            if not isinstance(section, dict):
                continue
            for slot, item_key in section.items():
                if not isinstance(item_key, str):
                    continue
                item = self.lookup_gear(item_key)
                if item is None:
                    log.warning(f"Gear '{item_key}' ({section_name}.{slot}) not in content catalog; slot treated as empty")
                    section[slot] = None
                else:
                    section[slot] = item.model_dump(by_alias=True)

        quest = (data.get("party") or {}).get("quest")
        if isinstance(quest, dict) and quest.get("key"):
            quest_item = self.lookup_quest(quest["key"])
            if quest_item is None:
                log.warning(f"Quest '{quest['key']}' not in content catalog")
            else:
                quest["data"] = quest_item.model_dump(by_alias=True)
        return data

    def __repr__(self) -> str:
        return f"ContentResolver(loaded={self.is_loaded}, gear={len(self._gear_flat)}, quests={len(self._quests)})"
