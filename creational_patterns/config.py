"""YAML configuration loader and validation for the pattern demos."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from creational_patterns.demos import known_demos

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.yaml")


@dataclass
class PrototypeConfig:
    """The card that gets cloned."""

    name: Optional[str] = "Raid Leader"
    mana: Optional[int] = 3
    attack: Optional[int] = 2
    defense: Optional[int] = 2


@dataclass
class FactoryMethodConfig:
    shapes: List[str] = field(default_factory=lambda: ["circle", "triangle"])


@dataclass
class SingletonConfig:
    rename_to: str = "🦀"


@dataclass
class WatchOrderConfig:
    """One order placed with a size-bound manufacture."""

    size: str  # "38mm" or "42mm"
    band: str  # BandType value, e.g. "Milanese"
    material: str  # MaterialType value, e.g. "Gold"


def _default_orders() -> List[WatchOrderConfig]:
    return [
        WatchOrderConfig(size="38mm", band="Milanese", material="Gold"),
        WatchOrderConfig(size="42mm", band="LinkBracelet", material="Gold"),
    ]


@dataclass
class AbstractFactoryConfig:
    orders: List[WatchOrderConfig] = field(default_factory=_default_orders)


@dataclass
class BuilderConfig:
    builders: List[str] = field(
        default_factory=lambda: ["jolly-vegetarian", "mischievous-mexican"]
    )


@dataclass
class DemosConfig:
    """Which demos run, plus the inputs for each usage snippet."""

    enabled: str = "all"  # "all" or comma-separated demo names
    prototype: PrototypeConfig = field(default_factory=PrototypeConfig)
    factory_method: FactoryMethodConfig = field(default_factory=FactoryMethodConfig)
    singleton: SingletonConfig = field(default_factory=SingletonConfig)
    abstract_factory: AbstractFactoryConfig = field(default_factory=AbstractFactoryConfig)
    builder: BuilderConfig = field(default_factory=BuilderConfig)

    @property
    def selected(self) -> List[str]:
        """Return demo names to run, in run order."""
        if self.enabled == "all":
            return known_demos()
        return [s.strip() for s in self.enabled.split(",") if s.strip()]


@dataclass
class OutputConfig:
    show_titles: bool = True


@dataclass
class AppConfig:
    """Top-level application configuration."""

    demos: DemosConfig = field(default_factory=DemosConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def selected_demos(self) -> List[str]:
        return self.demos.selected


def load_config(path: Optional[Path] = None, demos: Optional[List[str]] = None) -> AppConfig:
    """Load configuration from a YAML file, falling back to defaults."""
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.info("No config file at %s, using defaults", config_path)
        config = AppConfig()
    else:
        logger.info("Loading config from %s", config_path)
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
        config = _parse_config(raw) if raw else AppConfig()

    # CLI --demos override
    if demos:
        config.demos.enabled = ",".join(demos)

    _validate_config(config)
    return config


def _parse_config(raw: Dict[str, Any]) -> AppConfig:
    """Parse raw YAML dict into AppConfig."""
    config = AppConfig()

    if "demos" in raw:
        config.demos = _parse_demos_config(raw["demos"] or {})

    if "output" in raw:
        out = raw["output"] or {}
        config.output = OutputConfig(
            show_titles=bool(out.get("show_titles", config.output.show_titles)),
        )

    return config


def _parse_demos_config(raw: Dict[str, Any]) -> DemosConfig:
    dc = DemosConfig()

    if "enabled" in raw:
        enabled = raw["enabled"]
        if isinstance(enabled, list):
            enabled = ",".join(str(e) for e in enabled)
        dc.enabled = str(enabled)

    if "prototype" in raw:
        pr = raw["prototype"] or {}
        # A key present with a null value leaves that card field unset
        dc.prototype = PrototypeConfig(
            name=pr.get("name", dc.prototype.name),
            mana=pr.get("mana", dc.prototype.mana),
            attack=pr.get("attack", dc.prototype.attack),
            defense=pr.get("defense", dc.prototype.defense),
        )

    if "factory_method" in raw:
        fm = raw["factory_method"] or {}
        dc.factory_method = FactoryMethodConfig(
            shapes=[
                str(s)
                for s in _as_list(fm.get("shapes", dc.factory_method.shapes), "factory_method.shapes")
            ],
        )

    if "singleton" in raw:
        sg = raw["singleton"] or {}
        dc.singleton = SingletonConfig(
            rename_to=str(sg.get("rename_to", dc.singleton.rename_to)),
        )

    if "abstract_factory" in raw:
        af = raw["abstract_factory"] or {}
        if "orders" in af:
            dc.abstract_factory = AbstractFactoryConfig(
                orders=[
                    _parse_watch_order(o)
                    for o in _as_list(af["orders"], "abstract_factory.orders")
                ]
            )

    if "builder" in raw:
        bd = raw["builder"] or {}
        dc.builder = BuilderConfig(
            builders=[
                str(b)
                for b in _as_list(bd.get("builders", dc.builder.builders), "builder.builders")
            ],
        )

    return dc


def _as_list(value: Any, key: str) -> List[Any]:
    """A bare scalar counts as a one-item list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, (str, int, float)):
        return [value]
    raise ValueError(f"Config error: {key} must be a list, got {value!r}")


def _parse_watch_order(raw: Any) -> WatchOrderConfig:
    if not isinstance(raw, dict) or any(k not in raw for k in ("size", "band", "material")):
        raise ValueError(
            f"Config error: abstract_factory order {raw!r} needs size, band and material"
        )
    return WatchOrderConfig(
        size=str(raw["size"]),
        band=str(raw["band"]),
        material=str(raw["material"]),
    )


def _validate_config(config: AppConfig) -> None:
    """Validate config and raise on errors."""
    # Imported here so loading the registry does not pull in every demo
    from creational_patterns.patterns.abstract_factory import BandType, MaterialType, WatchSize
    from creational_patterns.patterns.builder import MEAL_BUILDERS
    from creational_patterns.patterns.enums import parse_enum
    from creational_patterns.patterns.factory_method import parse_shape_type

    selected = config.selected_demos
    if not selected:
        raise ValueError("Config error: no demos enabled")

    if len(selected) != len(set(selected)):
        raise ValueError(f"Config error: duplicate demo names in {selected}")

    known = known_demos()
    for name in selected:
        if name not in known:
            raise ValueError(f"Config error: unknown demo '{name}'. Known: {known}")

    demos = config.demos
    try:
        for shape in demos.factory_method.shapes:
            parse_shape_type(shape)
        for order in demos.abstract_factory.orders:
            parse_enum(WatchSize, order.size)
            parse_enum(BandType, order.band)
            parse_enum(MaterialType, order.material)
    except ValueError as exc:
        raise ValueError(f"Config error: {exc}") from exc

    for name in demos.builder.builders:
        if name not in MEAL_BUILDERS:
            raise ValueError(
                f"Config error: unknown meal builder '{name}'. "
                f"Known: {list(MEAL_BUILDERS.keys())}"
            )

    logger.info("Config validated: %d demos selected (%s)", len(selected), ", ".join(selected))
