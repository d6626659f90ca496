# habitforecast/models/user.py

# ─── Model ────────────────────────────────────────────────────────────────────
#            Habitica User Attributes and Vitals
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Models for the parts of a Habitica user payload the forecast needs.

`UserAttributes` is the snapshot fed to the stat aggregator and damage
simulator. It is built from the `/user` (or `/members/{id}`) payload with
`UserAttributes.from_api_data`, after gear and quest identifiers have been
hydrated by `ContentResolver`. `CharacterVitals` carries the display values
(gold, gems, health, ...) read from the same payload.
"""

# SECTION: IMPORTS
from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import Field, computed_field, field_validator, model_validator

from habitforecast.helpers._logger import log
from habitforecast.helpers._pydantic import HabitForecastBaseModel, create_from_dict

from .game_content import GearItem, Quest
from .stats import StatPoints

ClassId = Literal["warrior", "wizard", "rogue", "healer"]

# Display names only; formulas always use the internal id.
CLASS_DISPLAY_NAMES: dict[str, str] = {
    "warrior": "Warrior",
    "wizard": "Mage",
    "rogue": "Rogue",
    "healer": "Healer",
}


def class_display_name(class_id: str | None) -> str | None:
    if class_id is None:
        return None
    return CLASS_DISPLAY_NAMES.get(class_id, class_id.capitalize())


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# SECTION: USER SUBCOMPONENT MODELS


# KLASS: Buffs
class Buffs(StatPoints):
    """Temporary attribute changes plus rogue stealth charges."""

    stealth: int = Field(...)


# KLASS: PartyQuest
class PartyQuest(HabitForecastBaseModel):
    """The user's view of the party quest; `data` is filled in by the content resolver."""

    key: str | None = None
    data: Quest | None = None


# --- Raw payload shape (validation paths mirror the API field names) ---


class UserStatsPayload(StatPoints):
    lvl: int = Field(..., ge=0)
    klass: ClassId = Field(..., alias="class")
    buffs: Buffs


class UserGearPayload(HabitForecastBaseModel):
    equipped: dict[str, Any]
    costume: dict[str, Any] = Field(default_factory=dict)


class UserItemsPayload(HabitForecastBaseModel):
    gear: UserGearPayload


class UserPartyPayload(HabitForecastBaseModel):
    quest: PartyQuest = Field(default_factory=PartyQuest)

    @field_validator("quest", mode="before")
    @classmethod
    def none_is_no_quest(cls, value: Any) -> Any:
        return {} if value is None else value


class UserPayload(HabitForecastBaseModel):
    stats: UserStatsPayload
    items: UserItemsPayload
    party: UserPartyPayload = Field(default_factory=UserPartyPayload)

    @field_validator("party", mode="before")
    @classmethod
    def none_is_no_party(cls, value: Any) -> Any:
        return {} if value is None else value


# SECTION: USER ATTRIBUTES SNAPSHOT


# KLASS: UserAttributes
class UserAttributes(HabitForecastBaseModel):
    """Attribute sources for one user, plus the party quest they are on."""

    points: StatPoints
    buffs: Buffs
    level: int = Field(..., ge=0)
    class_id: ClassId = Field(..., alias="classId")
    # slot -> hydrated item, unresolved identifier (str), or empty (None)
    equipped_gear: dict[str, GearItem | str | None] = Field(default_factory=dict, alias="equippedGear")
    party_quest: PartyQuest | None = Field(None, alias="partyQuest")

    @classmethod
    def from_api_data(cls, raw_user: dict[str, Any]) -> UserAttributes:
        """Builds the snapshot from a raw (hydrated) Habitica user payload.

        Raises:
            MissingFieldError: If a required field is absent, named by its API path.
        """
        payload = create_from_dict(UserPayload, raw_user)
        stats = payload.stats

        equipped: dict[str, GearItem | str | None] = {}
        for slot, item in payload.items.gear.equipped.items():
            if isinstance(item, dict):
                equipped[slot] = create_from_dict(GearItem, item, prefix=f"items.gear.equipped.{slot}")
            elif item is None or item == "":
                equipped[slot] = None
            elif isinstance(item, str):
                equipped[slot] = item
            else:
                raise TypeError(f"Unexpected value for gear slot '{slot}': {type(item).__name__}")

        unresolved = [slot for slot, item in equipped.items() if isinstance(item, str)]
        if unresolved:
            log.debug(f"Gear slots still holding identifiers: {unresolved}")

        return cls(
            points=StatPoints(str_=stats.str_, con=stats.con, int_=stats.int_, per=stats.per),
            buffs=stats.buffs,
            level=stats.lvl,
            class_id=stats.klass,
            equipped_gear=equipped,
            party_quest=payload.party.quest,
        )

    @property
    def stealth(self) -> int:
        return self.buffs.stealth

    @property
    def is_on_quest(self) -> bool:
        return self.party_quest is not None and self.party_quest.data is not None

    @property
    def is_on_boss_quest(self) -> bool:
        return self.is_on_quest and self.party_quest.data.boss is not None

    @property
    def boss_strength(self) -> float | None:
        if not self.is_on_boss_quest:
            return None
        return self.party_quest.data.boss.strength

    @property
    def class_display_name(self) -> str:
        return class_display_name(self.class_id)


# SECTION: CHARACTER VITALS


# KLASS: CharacterVitals
class CharacterVitals(HabitForecastBaseModel):
    """Display values read from a user payload. Not used by any formula."""

    balance: float = 0.0
    hourglasses: int = 0
    gp: float = 0.0
    level: int = 1
    display_name: str = ""
    bio: str | None = None
    class_id: str | None = None
    exp: float = 0.0
    to_next_level: float = 0.0
    mp: float = 0.0
    max_mp: float = 0.0
    hp: float = 0.0
    max_hp: float = 0.0
    is_sleeping: bool = False
    wears_costume: bool = False
    equipped: dict[str, Any] = Field(default_factory=dict)
    costume: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def flatten_user_payload(cls, data: Any) -> Any:
        """Accepts the nested user payload and picks out the display fields."""
        if not isinstance(data, dict) or "stats" not in data:
            return data
        stats = data.get("stats") or {}
        profile = data.get("profile") or {}
        preferences = data.get("preferences") or {}
        gear = (data.get("items") or {}).get("gear") or {}
        plan = ((data.get("purchased") or {}).get("plan") or {}).get("consecutive") or {}
        values = {
            "balance": data.get("balance", 0.0),
            "hourglasses": plan.get("trinkets", 0),
            "gp": stats.get("gp", 0.0),
            "level": stats.get("lvl", 1),
            "display_name": profile.get("name") or "",
            "bio": profile.get("blurb"),
            "class_id": stats.get("class"),
            "exp": stats.get("exp", 0.0),
            "to_next_level": stats.get("toNextLevel", 0.0),
            "mp": stats.get("mp", 0.0),
            "max_mp": stats.get("maxMP", 0.0),
            "hp": stats.get("hp", 0.0),
            "max_hp": stats.get("maxHealth", 0.0),
            "is_sleeping": bool(preferences.get("sleep", False)),
            "wears_costume": bool(preferences.get("costume", False)),
            "equipped": gear.get("equipped") or {},
            "costume": gear.get("costume") or {},
        }
        return values

    @computed_field
    @property
    def gems(self) -> int:
        return round_half_up(self.balance * 4)

    @computed_field
    @property
    def gold(self) -> int:
        return round_half_up(self.gp)

    @computed_field
    @property
    def class_display_name(self) -> str | None:
        return class_display_name(self.class_id)

    @computed_field
    @property
    def experience(self) -> int:
        return math.floor(self.exp)

    @computed_field
    @property
    def experience_to_level(self) -> int:
        return round_half_up(self.to_next_level)

    @computed_field
    @property
    def mana(self) -> int:
        return math.floor(self.mp)

    @computed_field
    @property
    def mana_max(self) -> int:
        return round_half_up(self.max_mp)

    @computed_field
    @property
    def health(self) -> int:
        return math.floor(self.hp)

    @computed_field
    @property
    def health_max(self) -> int:
        return round_half_up(self.max_hp)

    @property
    def outfit(self) -> dict[str, Any]:
        """The gear shown on the avatar: costume when enabled, else battle gear."""
        return self.costume if self.wears_costume else self.equipped
