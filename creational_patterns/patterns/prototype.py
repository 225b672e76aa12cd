"""Prototype: clone a card without re-specifying its fields."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from creational_patterns.config import AppConfig

logger = logging.getLogger(__name__)

INCOMPLETE_CARD = "Some properties are nil"


@dataclass
class Card:
    """A card for a cardboard game. Every field may be left unset."""

    name: Optional[str] = None
    mana: Optional[int] = None
    attack: Optional[int] = None
    defense: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return all(getattr(self, f.name) is not None for f in fields(self))

    def clone(self, **changes: Any) -> Card:
        """Return an independent copy, optionally overriding some fields.

        Unset fields stay unset in the copy.  Unknown field names raise
        TypeError, same as the dataclass constructor.
        """
        copy = replace(self, **changes)
        logger.debug("Cloned card %r (overrides: %s)", self.name, sorted(changes))
        return copy

    def render(self) -> str:
        if not self.is_complete:
            return INCOMPLETE_CARD
        return (
            f"Card name: {self.name}, Mana: {self.mana}, "
            f"Attack: {self.attack}, Defense: {self.defense}"
        )


def run_demo(config: AppConfig) -> List[str]:
    cfg = config.demos.prototype
    # This is the card that we will copy
    raid_leader = Card(name=cfg.name, mana=cfg.mana, attack=cfg.attack, defense=cfg.defense)

    faceless_manipulator = raid_leader.clone()
    return [faceless_manipulator.render()]
