"""Demo entry-point protocol and the lazily imported demo registry."""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Protocol

if TYPE_CHECKING:
    from creational_patterns.config import AppConfig


class DemoEntry(Protocol):
    """A pattern's usage snippet.

    Takes the app config (for the snippet's inputs) and returns the
    lines the snippet prints, in order.
    """

    def __call__(self, config: AppConfig) -> List[str]:
        ...


@dataclass(frozen=True)
class DemoInfo:
    """Registry entry for one pattern demo."""

    name: str  # e.g. "prototype", used in config and --demos
    title: str  # e.g. "Prototype"
    target: str  # qualified name of the run_demo function
    summary: str = ""


# Registration order is the default run order.
_DEMO_REGISTRY: Dict[str, DemoInfo] = {
    info.name: info
    for info in (
        DemoInfo(
            name="prototype",
            title="🗿 Prototype",
            target="creational_patterns.patterns.prototype.run_demo",
            summary="Clone a card without re-specifying its fields",
        ),
        DemoInfo(
            name="factory-method",
            title="🏭 Factory Method",
            target="creational_patterns.patterns.factory_method.run_demo",
            summary="Pick the concrete shape from a discriminator",
        ),
        DemoInfo(
            name="singleton",
            title="🐙 Singleton",
            target="creational_patterns.patterns.singleton.run_demo",
            summary="One lazily created, shared MonsterBoss",
        ),
        DemoInfo(
            name="abstract-factory",
            title="🏗 Abstract Factory",
            target="creational_patterns.patterns.abstract_factory.run_demo",
            summary="Size-matched watch bands and dials",
        ),
        DemoInfo(
            name="builder",
            title="👷 Builder",
            target="creational_patterns.patterns.builder.run_demo",
            summary="A director assembles meals step by step",
        ),
    )
}


def get_demo_info(name: str) -> DemoInfo:
    info = _DEMO_REGISTRY.get(name)
    if info is None:
        raise ValueError(
            f"Unknown demo '{name}'. Available: {list(_DEMO_REGISTRY.keys())}"
        )
    return info


def get_demo(name: str) -> DemoEntry:
    """Import and return the entry point for a demo name."""
    module_path, func_name = get_demo_info(name).target.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, func_name)


def known_demos() -> List[str]:
    """Return demo names in registration order."""
    return list(_DEMO_REGISTRY.keys())


def all_demo_infos() -> List[DemoInfo]:
    return list(_DEMO_REGISTRY.values())
