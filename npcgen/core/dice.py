"""
Dice expression module for npcgen.

Defines DiceFunction, the value type used for hit points and damage. A dice
function is a sequence of single dice (each one stored as its number of
sides) plus a flat constant. Nothing here rolls dice: the engine only needs to
count dice terms, adjust the constant and render the expression.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# A signed dice term ("+2d6", "- 3") or a bare leading term ("5d8").
_TERM_PATTERN = re.compile(r"([+-]?)\s*(?:(\d*)[dD](\d+)|(\d+))")


class DiceFunction(BaseModel):
    """
    A dice expression such as 5d8+10.

    Each entry of ``dice`` is one die, so 5d8 is stored as five entries of 8.
    The number of entries is the number of dice terms used by the hit point
    and proficiency rules.
    """

    model_config = ConfigDict(frozen=True)

    dice: tuple[int, ...] = Field(
        default=(),
        description="The sides of every single die in the expression.",
    )
    constant: int = Field(
        default=0,
        description="The flat value added to the dice.",
    )

    @model_validator(mode="before")
    @classmethod
    def _accept_expression(cls, data: Any) -> Any:
        """Allows a dice function to be given as its textual form."""
        if isinstance(data, str):
            return cls._parse_terms(data)
        return data

    @field_validator("dice")
    @classmethod
    def _check_sides(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        for sides in value:
            if sides < 1:
                raise ValueError(f"A die must have at least one side, got {sides}.")
        return value

    @classmethod
    def _parse_terms(cls, expression: str) -> dict[str, Any]:
        """
        Splits an expression like "2d6 + 1d4 - 2" into dice and constant.

        Args:
            expression (str): The dice expression.

        Raises:
            ValueError: If the expression contains anything but dice terms
                and integers joined by + or -, or subtracts dice.

        Returns:
            dict[str, Any]: The ``dice`` and ``constant`` fields.

        """
        expr = expression.strip()
        if not expr:
            raise ValueError("Invalid dice expression: empty")

        dice: list[int] = []
        constant = 0
        position = 0
        for match in _TERM_PATTERN.finditer(expr):
            gap = expr[position : match.start()]
            if gap.strip():
                raise ValueError(f"Invalid dice expression: {expression!r}")
            sign, count_str, sides_str, number_str = match.groups()
            if match.start() > 0 and not sign:
                raise ValueError(f"Missing operator in dice expression: {expression!r}")
            if sides_str is not None:
                if sign == "-":
                    raise ValueError(f"Dice cannot be subtracted: {expression!r}")
                count = int(count_str) if count_str else 1
                dice.extend([int(sides_str)] * count)
            else:
                value = int(number_str)
                constant += -value if sign == "-" else value
            position = match.end()

        if position == 0 or expr[position:].strip():
            raise ValueError(f"Invalid dice expression: {expression!r}")
        return {"dice": tuple(dice), "constant": constant}

    @classmethod
    def parse(cls, expression: str) -> "DiceFunction":
        """
        Builds a dice function from its textual form.

        Args:
            expression (str): A dice expression like "5d8+10".

        Returns:
            DiceFunction: The parsed dice function.

        """
        return cls(**cls._parse_terms(expression))

    @property
    def num_dice(self) -> int:
        """Returns the number of dice terms."""
        return len(self.dice)

    def with_constant_added(self, amount: int) -> "DiceFunction":
        """
        Returns a copy of this dice function with a larger constant.

        Args:
            amount (int): The value to add to the constant (may be negative).

        Returns:
            DiceFunction: The new dice function. Dice terms are unchanged.

        """
        return self.model_copy(update={"constant": self.constant + amount})

    def average(self) -> int:
        """
        Returns the average result, rounded down, as printed in stat blocks.
        """
        # Each die averages (sides + 1) / 2, summed in halves to stay integral.
        return (sum(sides + 1 for sides in self.dice) + 2 * self.constant) // 2

    def __str__(self) -> str:
        groups: list[tuple[int, int]] = []
        for sides in self.dice:
            if groups and groups[-1][1] == sides:
                groups[-1] = (groups[-1][0] + 1, sides)
            else:
                groups.append((1, sides))

        text = "+".join(f"{count}d{sides}" for count, sides in groups)
        if not text:
            return str(self.constant)
        if self.constant:
            text += f"{self.constant:+d}"
        return text
