"""Builder: a director assembles a Meal through a fixed sequence of steps."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Dict, List, Optional, Protocol, Type, runtime_checkable

if TYPE_CHECKING:
    from creational_patterns.config import AppConfig

logger = logging.getLogger(__name__)

INCOMPLETE_MEAL = "Nil value detected"


@dataclass
class Meal:
    """Product.  Partially built meals are valid but render the sentinel."""

    sandwich: Optional[str] = None
    side_order: Optional[str] = None
    drink: Optional[str] = None
    offer: Optional[str] = None
    price: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        return all(getattr(self, f.name) is not None for f in fields(self))

    def render(self) -> str:
        if not self.is_complete:
            return INCOMPLETE_MEAL
        return f"{self.sandwich}, {self.side_order}, {self.drink}, {self.offer}, {self.price:.2f}"


@runtime_checkable
class MealBuilder(Protocol):
    """Steps a director can drive, plus access to the result."""

    def add_sandwich(self) -> None: ...

    def add_side_order(self) -> None: ...

    def add_drink(self) -> None: ...

    def add_offer_item(self) -> None: ...

    def set_price(self) -> None: ...

    def get_meal(self) -> Meal: ...


class MealDirector:
    def make_meal(self, meal_builder: MealBuilder) -> None:
        logger.debug("Directing %s", type(meal_builder).__name__)
        meal_builder.add_sandwich()
        meal_builder.add_side_order()
        meal_builder.add_drink()
        meal_builder.add_offer_item()
        meal_builder.set_price()


class JollyVegetarianMealBuilder:
    def __init__(self) -> None:
        self._meal = Meal()

    def add_sandwich(self) -> None:
        self._meal.sandwich = "Vegeburger"

    def add_side_order(self) -> None:
        self._meal.side_order = "Fries"

    def add_drink(self) -> None:
        self._meal.drink = "Orange juice"

    def add_offer_item(self) -> None:
        self._meal.offer = "Donut voucher"

    def set_price(self) -> None:
        self._meal.price = 4.99

    def get_meal(self) -> Meal:
        return self._meal


class MischievousMexicanMealBuilder:
    def __init__(self) -> None:
        self._meal = Meal()

    def add_sandwich(self) -> None:
        self._meal.sandwich = "Spicy burger"

    def add_side_order(self) -> None:
        self._meal.side_order = "Nachos"

    def add_drink(self) -> None:
        self._meal.drink = "Tequila"

    def add_offer_item(self) -> None:
        self._meal.offer = "Hat"

    def set_price(self) -> None:
        self._meal.price = 5.49

    def get_meal(self) -> Meal:
        return self._meal


# Config name -> builder class
MEAL_BUILDERS: Dict[str, Type[MealBuilder]] = {
    "jolly-vegetarian": JollyVegetarianMealBuilder,
    "mischievous-mexican": MischievousMexicanMealBuilder,
}


def run_demo(config: AppConfig) -> List[str]:
    director = MealDirector()
    lines: List[str] = []
    for name in config.demos.builder.builders:
        meal_builder = MEAL_BUILDERS[name]()
        director.make_meal(meal_builder)
        lines.append(meal_builder.get_meal().render())
    return lines
