"""Abstract Factory: watch bands and dials produced in matching sizes.

get_factory() hands out the factory bound to one WatchSize.  Everything
that factory creates carries that size, so a caller holding one factory
cannot end up with a 38mm band on a 42mm dial.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Dict, List, Protocol, Type, Union, runtime_checkable

from creational_patterns.patterns.enums import parse_enum

if TYPE_CHECKING:
    from creational_patterns.config import AppConfig

logger = logging.getLogger(__name__)


class MaterialType(str, Enum):
    ALUMINIUM = "Aluminium"
    STAINLESS_STEEL = "Stainless Steel"
    GOLD = "Gold"


class BandType(str, Enum):
    MILANESE = "Milanese"
    CLASSIC = "Classic"
    LEATHER = "Leather"
    MODERN = "Modern"
    LINK_BRACELET = "LinkBracelet"
    SPORT_BAND = "SportBand"


class WatchSize(str, Enum):
    MM38 = "38mm"
    MM42 = "42mm"


class BandSize(str, Enum):
    SM = "SM"
    ML = "ML"


# Strap length that fits each case size.
BAND_FIT: Dict[WatchSize, BandSize] = {
    WatchSize.MM38: BandSize.SM,
    WatchSize.MM42: BandSize.ML,
}


@dataclass
class WatchBand:
    type: BandType
    size: WatchSize
    color: str = "yellow"

    @property
    def fit(self) -> BandSize:
        return BAND_FIT[self.size]


@dataclass
class WatchDial:
    material: MaterialType
    size: WatchSize


@runtime_checkable
class WatchFactory(Protocol):
    """Interface every size-bound factory implements.

    The bodies below are placeholders; reaching one means a caller used
    the interface itself instead of a concrete factory.
    """

    size: WatchSize

    def create_band(self, band_type: BandType) -> WatchBand:
        raise NotImplementedError("WatchFactory.create_band called on the interface")

    def create_dial(self, material: MaterialType) -> WatchDial:
        raise NotImplementedError("WatchFactory.create_dial called on the interface")


def _make_band(band_type: Union[BandType, str], size: WatchSize) -> WatchBand:
    band = WatchBand(type=parse_enum(BandType, band_type), size=size)
    logger.debug("Made %s band (%s, fit %s)", band.type.value, size.value, band.fit.value)
    return band


def _make_dial(material: Union[MaterialType, str], size: WatchSize) -> WatchDial:
    dial = WatchDial(material=parse_enum(MaterialType, material), size=size)
    logger.debug("Made %s dial (%s)", dial.material.value, size.value)
    return dial


class Watch38mmFactory(WatchFactory):
    """Manufacture specialised in 38mm watch parts."""

    size: ClassVar[WatchSize] = WatchSize.MM38

    def create_band(self, band_type: BandType) -> WatchBand:
        return _make_band(band_type, self.size)

    def create_dial(self, material: MaterialType) -> WatchDial:
        return _make_dial(material, self.size)


class Watch42mmFactory(WatchFactory):
    """Manufacture specialised in 42mm watch parts."""

    size: ClassVar[WatchSize] = WatchSize.MM42

    def create_band(self, band_type: BandType) -> WatchBand:
        return _make_band(band_type, self.size)

    def create_dial(self, material: MaterialType) -> WatchDial:
        return _make_dial(material, self.size)


_FACTORIES: Dict[WatchSize, Type[WatchFactory]] = {
    WatchSize.MM38: Watch38mmFactory,
    WatchSize.MM42: Watch42mmFactory,
}

for _table in (_FACTORIES, BAND_FIT):
    _missing = set(WatchSize) - set(_table)
    if _missing:
        raise RuntimeError(f"WatchSize not covered: {sorted(m.value for m in _missing)}")


def get_factory(size: Union[WatchSize, str]) -> WatchFactory:
    """Return the factory whose products all have ``size``."""
    watch_size = parse_enum(WatchSize, size)
    factory = _FACTORIES[watch_size]()
    logger.debug("Selected %s for %s", type(factory).__name__, watch_size.value)
    return factory


def run_demo(config: AppConfig) -> List[str]:
    lines: List[str] = []
    for order in config.demos.abstract_factory.orders:
        manufacture = get_factory(order.size)

        band = manufacture.create_band(order.band)
        lines.append(f"{band.size.value} {band.type.value}")

        dial = manufacture.create_dial(order.material)
        lines.append(f"{dial.material.value} {dial.size.value}")
    return lines
