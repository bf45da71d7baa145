"""
Armor class module for npcgen.

An armor class is computed by a method (ACMod): a base value, a flat bonus
and, for every ability, a cap on how much of its modifier may be added.
Several methods may compete for the same character (armor, spells, class
features); ``resolve_ac_method`` picks the one in use and ``calculate_ac``
does the arithmetic for a single method.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from npcgen.core.constants import (
    BASE_ARMOR_CLASS,
    UNLIMITED_CAP_SENTINEL,
    Ability,
    CapKind,
)
from npcgen.core.logging import log_debug

from .stat_block import StatBlock


class AbilityCap(BaseModel):
    """
    How much of one ability modifier an AC method may add.

    ZERO adds nothing, UNLIMITED adds the whole modifier and CAPPED(n) adds
    at most n. Caps only bound the upper side: a negative modifier always
    passes through a CAPPED cap unchanged.

    Data files may give a plain integer instead: 0 is ZERO, any negative
    value (conventionally -1) is UNLIMITED and a positive n is CAPPED(n).
    """

    model_config = ConfigDict(frozen=True)

    kind: CapKind = Field(
        default=CapKind.ZERO,
        description="The kind of cap.",
    )
    value: int = Field(
        default=0,
        description="The upper bound, only meaningful for CAPPED caps.",
    )

    @model_validator(mode="before")
    @classmethod
    def _accept_integer(cls, data: Any) -> Any:
        if isinstance(data, bool):
            raise ValueError("An ability cap cannot be a boolean.")
        if isinstance(data, int):
            if data == 0:
                return {"kind": CapKind.ZERO}
            if data < 0:
                return {"kind": CapKind.UNLIMITED}
            return {"kind": CapKind.CAPPED, "value": data}
        return data

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if self.kind == CapKind.CAPPED and self.value < 1:
            raise ValueError(f"A CAPPED cap needs a positive value, got {self.value}.")
        if self.kind != CapKind.CAPPED and self.value != 0:
            raise ValueError(f"A {self.kind} cap cannot carry a value.")

    @classmethod
    def zero(cls) -> "AbilityCap":
        return cls(kind=CapKind.ZERO)

    @classmethod
    def unlimited(cls) -> "AbilityCap":
        return cls(kind=CapKind.UNLIMITED)

    @classmethod
    def capped(cls, value: int) -> "AbilityCap":
        return cls(kind=CapKind.CAPPED, value=value)

    def contribution(self, modifier: int) -> int:
        """
        Returns how much of ``modifier`` this cap lets through.

        Args:
            modifier (int): The ability modifier.

        Returns:
            int: The amount added to AC.

        """
        if self.kind == CapKind.ZERO:
            return 0
        if self.kind == CapKind.UNLIMITED:
            return modifier
        return min(modifier, self.value)

    def as_int(self) -> int:
        """Returns the integer form of this cap used in data files."""
        if self.kind == CapKind.UNLIMITED:
            return UNLIMITED_CAP_SENTINEL
        return self.value

    def __str__(self) -> str:
        if self.kind == CapKind.CAPPED:
            return f"max {self.value}"
        return self.kind.display_name


class AbilityCaps(BaseModel):
    """The six ability caps of an AC method. Every cap defaults to ZERO."""

    model_config = ConfigDict(frozen=True)

    strength: AbilityCap = Field(default_factory=AbilityCap.zero)
    dexterity: AbilityCap = Field(default_factory=AbilityCap.zero)
    constitution: AbilityCap = Field(default_factory=AbilityCap.zero)
    intelligence: AbilityCap = Field(default_factory=AbilityCap.zero)
    wisdom: AbilityCap = Field(default_factory=AbilityCap.zero)
    charisma: AbilityCap = Field(default_factory=AbilityCap.zero)

    def cap(self, ability: Ability) -> AbilityCap:
        """Returns the cap for the given ability."""
        return getattr(self, ability.field_name)


class ACMod(BaseModel):
    """
    A way of calculating armor class.

    The resulting AC is ``set + addition`` plus, for each ability, the part
    of its modifier allowed through by the matching cap.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        default="",
        description="The name of the method (e.g. 'Studded Leather').",
    )
    set: int = Field(
        default=BASE_ARMOR_CLASS,
        description="The base AC this method replaces the default 10 with.",
    )
    addition: int = Field(
        default=0,
        description="A flat bonus added unconditionally.",
    )
    add_max_ability_scores: AbilityCaps = Field(
        default_factory=AbilityCaps,
        description="How much of each ability modifier may be added.",
    )


# The way AC is calculated for someone not wearing anything: 10 + Dex.
BASE_AC = ACMod(
    name="Unarmored",
    set=BASE_ARMOR_CLASS,
    addition=0,
    add_max_ability_scores=AbilityCaps(dexterity=AbilityCap.unlimited()),
)


def calculate_ac(stat_block: StatBlock, method: ACMod) -> int:
    """
    Calculates the armor class given by a single AC method.

    Args:
        stat_block (StatBlock): The final (fully combined) stat block.
        method (ACMod): The AC method.

    Returns:
        int: The armor class.

    """
    as_mod = 0
    for ability in Ability:
        cap = method.add_max_ability_scores.cap(ability)
        as_mod += cap.contribution(stat_block.ability_scores.modifier(ability))
    return method.set + method.addition + as_mod


def resolve_ac_method(candidates: Sequence[ACMod]) -> ACMod:
    """
    Picks the AC method in use among competing candidates.

    Candidates are ordered from the most inherent (BASE_AC, racial traits)
    to the most specific (class features, items, spells). The most specific
    one wins; an empty list falls back to BASE_AC.

    Args:
        candidates (Sequence[ACMod]): The priority-ordered candidates.

    Returns:
        ACMod: The method used to calculate AC.

    """
    if not candidates:
        return BASE_AC
    method = candidates[-1]
    log_debug(
        "Resolved AC method",
        {"method": method.name, "candidates": len(candidates)},
    )
    return method
