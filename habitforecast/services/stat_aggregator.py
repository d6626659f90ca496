# habitforecast/services/stat_aggregator.py

# SECTION: MODULE DOCSTRING
"""Attribute aggregation and constitution mitigation.

totals[a] = armor[a] + buffs[a] + points[a] + floor(level / 2)

where armor[a] sums every equipped item's bonus, multiplied by 1.5 for items
belonging to the wearer's class.
"""

# SECTION: IMPORTS
import math

from habitforecast.exceptions import MissingFieldError
from habitforecast.helpers._logger import log
from habitforecast.models.game_content import GearItem
from habitforecast.models.stats import STAT_NAMES, DerivedStats, StatPoints
from habitforecast.models.user import UserAttributes

CLASS_GEAR_MULTIPLIER = 1.5
CON_MITIGATION_DIVISOR = 250.0
CON_MITIGATION_FLOOR = 0.1


# FUNC: calculate_level_bonus
def calculate_level_bonus(level: int) -> int:
    """+1 to every attribute per two levels (no cap)."""
    return math.floor(level / 2)


# FUNC: calculate_gear_bonus
def calculate_gear_bonus(equipped_gear: dict[str, GearItem | str | None], class_id: str) -> dict[str, float]:
    """Sums attribute bonuses over the equipped items.

    Raises:
        MissingFieldError: If a slot still holds an unresolved identifier.
    """
    total_bonus = {stat: 0.0 for stat in STAT_NAMES}
    for slot, item in equipped_gear.items():
        if item is None:
            continue
        if isinstance(item, str):
            raise MissingFieldError(
                f"items.gear.equipped.{slot}",
                model="GearItem",
                reason=f"'{item}' was not resolved against a content catalog",
            )
        multiplier = CLASS_GEAR_MULTIPLIER if item.matches_class(class_id) else 1.0
        for stat in STAT_NAMES:
            total_bonus[stat] += item.get(stat) * multiplier
    return total_bonus


# FUNC: compute_derived_stats
def compute_derived_stats(attrs: UserAttributes) -> DerivedStats:
    """Combines points, buffs, gear and level into total attributes."""
    level_bonus = calculate_level_bonus(attrs.level)
    armor = calculate_gear_bonus(attrs.equipped_gear, attrs.class_id)

    totals = {stat: armor[stat] + attrs.buffs.get(stat) + attrs.points.get(stat) + level_bonus for stat in STAT_NAMES}
    log.debug(f"Derived stats: armor={armor} level_bonus={level_bonus} totals={totals}")

    return DerivedStats(
        armor=StatPoints.from_mapping(armor),
        buffs=StatPoints.from_mapping(attrs.buffs.as_dict()),
        points=attrs.points,
        level_bonus=level_bonus,
        totals=StatPoints.from_mapping(totals),
    )


# FUNC: compute_constitution_bonus
def compute_constitution_bonus(total_con: float) -> float:
    """Damage multiplier from constitution: max(0.1, 1 - con / 250).

    Reaches the 0.1 floor at con = 225. Negative con (debuffs) gives more
    than 1.0. NaN propagates.
    """
    bonus = 1.0 - total_con / CON_MITIGATION_DIVISOR
    if bonus < CON_MITIGATION_FLOOR:
        return CON_MITIGATION_FLOOR
    return bonus
