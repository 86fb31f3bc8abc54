"""Domain models for the pizza description service.

Defines Pydantic models for cheeses and pizzas, plus the topping enumeration.
Required fields use non-optional types so a missing value is rejected at
construction; optional fields are typed ``Optional[...]`` and every
description method handles their absence explicitly.
"""

from enum import Enum
from typing import List, Optional, Annotated
from pydantic import BaseModel, Field, field_validator, ConfigDict

from src.utils.logger import logger


class Topping(str, Enum):
    """Closed set of pizza toppings. The value is the display name."""

    PEPPERONI = "Pepperoni"
    SAUSAGE = "Sausage"
    BASIL = "Basil"
    PEPPER = "Pepper"
    ONION = "Onion"
    MEATBALL = "Meatball"
    HAM = "Ham"
    PINEAPPLE = "Pineapple"
    OLIVES = "Olives"
    BACON = "Bacon"

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def _is_blank(value: Optional[str]) -> bool:
    """True when value is None, empty, or whitespace only."""
    return value is None or not value.strip()


class Cheese(BaseModel):
    """Domain model for a cheese.

    Only the name is required, and it defaults to an empty string so it is
    never absent. Fat fraction and animal origin are independently optional.
    The fat fraction is deliberately not range-checked.
    """

    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field("", description="Cheese name (empty means unknown)")]
    fat_fraction: Annotated[
        Optional[float],
        Field(None, description="Milk fat as a fraction, e.g. 0.22 for 22% (not validated)"),
    ]
    animal_origin: Annotated[
        Optional[str],
        Field(None, description="Animal or species the milk comes from"),
    ]

    @property
    def display_name(self) -> str:
        """Name used in sentences; blank names read as "An Unknown"."""
        return "An Unknown" if _is_blank(self.name) else self.name

    def describe(self) -> str:
        """Build a sentence describing this cheese.

        Absent optional fields drop their clause; the joining "and" only
        appears when both the origin and the fat clause are present.

        Returns:
            Description ending with a period, e.g.
            "Parmesan cheese is made from cow milk and has 32.00% fat milk."
        """
        parts = [f"{self.display_name} cheese"]

        has_origin = not _is_blank(self.animal_origin)
        if has_origin:
            parts.append(f" is made from {self.animal_origin} milk")

        if has_origin and self.fat_fraction is not None:
            parts.append(" and")

        if self.fat_fraction is not None:
            parts.append(f" has {self.fat_fraction:.2%} fat milk")

        parts.append(".")
        return "".join(parts)

    def origin_text(self, default: str = "Unknown animal") -> str:
        """Return the stripped animal origin, or ``default`` when unspecified."""
        if _is_blank(self.animal_origin):
            return default
        return self.animal_origin.strip()


class CheeseCatalog:
    """Factories for well-known cheeses. Every call returns a new instance."""

    @staticmethod
    def standard() -> Cheese:
        return Cheese(name="Mozzarella", animal_origin="Italian buffalo", fat_fraction=0.22)

    @staticmethod
    def parmesan() -> Cheese:
        return Cheese(name="Parmesan", animal_origin="cow", fat_fraction=0.32)


class Pizza(BaseModel):
    """Domain model for a pizza.

    ``toppings`` is required and typed as a plain list, so passing ``None``
    fails validation at construction rather than being checked later.
    ``cheeses`` may be omitted or ``None``, in which case it defaults to a
    single standard cheese; an explicit empty list is kept as-is.
    """

    model_config = ConfigDict(frozen=True)

    toppings: Annotated[List[Topping], Field(description="Toppings in the order they were added")]
    cheeses: Annotated[
        List[Cheese],
        Field(
            None,
            validate_default=True,
            description="Cheeses on the pizza (defaults to Mozzarella when not provided)",
        ),
    ]

    @field_validator("cheeses", mode="before")
    @classmethod
    def default_cheeses(cls, cheeses: Optional[List[Cheese]]) -> List[Cheese]:
        """Substitute the standard cheese when none were given."""
        if cheeses is None:
            logger.debug("No cheeses provided, defaulting to standard cheese")
            return [CheeseCatalog.standard()]
        return cheeses

    @field_validator("toppings", "cheeses", mode="after")
    @classmethod
    def copy_collection(cls, items: list) -> list:
        """Take a private copy so the caller's list can change independently."""
        return list(items)

    def get_toppings_text(self) -> str:
        """Return topping names joined by ", ", or "no toppings" when empty."""
        if len(self.toppings) > 0:
            return ", ".join(topping.display_name for topping in self.toppings)

        return "no toppings"

    def get_description(self, pizza_name: Optional[str] = None) -> str:
        """Describe the pizza's cheeses and toppings.

        Args:
            pizza_name: Display name. Blank or None falls back to "This pizza".

        Returns:
            Sentence such as
            "This pizza is made with Mozzarella cheese, and has Ham, Pineapple on it."
        """
        cheese_str = ", ".join(cheese.name for cheese in self.cheeses)
        subject = "This pizza" if _is_blank(pizza_name) else pizza_name

        return f"{subject} is made with {cheese_str} cheese, and has {self.get_toppings_text()} on it."
