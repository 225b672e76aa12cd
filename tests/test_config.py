"""Tests for demo configuration."""

import pytest
import yaml

from creational_patterns.config import (
    AppConfig,
    DemosConfig,
    WatchOrderConfig,
    _parse_config,
    _validate_config,
    load_config,
)
from creational_patterns.demos import known_demos


def test_default_config():
    config = AppConfig()
    assert config.demos.enabled == "all"
    assert config.selected_demos == known_demos()
    assert config.demos.prototype.name == "Raid Leader"
    assert len(config.demos.abstract_factory.orders) == 2
    assert config.output.show_titles


def test_selected_specific():
    config = AppConfig(demos=DemosConfig(enabled="singleton, builder"))
    assert config.selected_demos == ["singleton", "builder"]


def test_parse_full_config():
    raw = {
        "demos": {
            "enabled": ["prototype", "abstract-factory"],
            "prototype": {"name": "Faceless Manipulator", "mana": 5, "attack": 3, "defense": 3},
            "factory_method": {"shapes": ["square"]},
            "singleton": {"rename_to": "Kraken"},
            "abstract_factory": {
                "orders": [{"size": "42mm", "band": "Leather", "material": "Aluminium"}],
            },
            "builder": {"builders": ["mischievous-mexican"]},
        },
        "output": {"show_titles": False},
    }
    config = _parse_config(raw)
    assert config.selected_demos == ["prototype", "abstract-factory"]
    assert config.demos.prototype.mana == 5
    assert config.demos.factory_method.shapes == ["square"]
    assert config.demos.singleton.rename_to == "Kraken"
    assert config.demos.abstract_factory.orders == [
        WatchOrderConfig(size="42mm", band="Leather", material="Aluminium")
    ]
    assert config.demos.builder.builders == ["mischievous-mexican"]
    assert not config.output.show_titles


def test_parse_partial_prototype_keeps_defaults():
    config = _parse_config({"demos": {"prototype": {"name": "Wisp"}}})
    assert config.demos.prototype.name == "Wisp"
    assert config.demos.prototype.mana == 3


def test_parse_null_prototype_field_leaves_it_unset():
    config = _parse_config({"demos": {"prototype": {"attack": None}}})
    assert config.demos.prototype.attack is None


def test_validate_config_unknown_demo():
    config = AppConfig(demos=DemosConfig(enabled="prototype,adapter"))
    with pytest.raises(ValueError, match="unknown demo 'adapter'"):
        _validate_config(config)


def test_validate_config_no_demos():
    config = AppConfig(demos=DemosConfig(enabled=" , "))
    with pytest.raises(ValueError, match="no demos enabled"):
        _validate_config(config)


def test_validate_config_duplicate_demos():
    config = AppConfig(demos=DemosConfig(enabled="builder,builder"))
    with pytest.raises(ValueError, match="duplicate demo names"):
        _validate_config(config)


def test_validate_config_unknown_shape():
    config = AppConfig()
    config.demos.factory_method.shapes = ["circle", "hexagon"]
    with pytest.raises(ValueError, match="Config error: Unknown ShapeType 'hexagon'"):
        _validate_config(config)


def test_validate_config_unknown_watch_size():
    config = AppConfig()
    config.demos.abstract_factory.orders = [
        WatchOrderConfig(size="40mm", band="Milanese", material="Gold"),
    ]
    with pytest.raises(ValueError, match="Unknown WatchSize '40mm'"):
        _validate_config(config)


def test_validate_config_unknown_material():
    config = AppConfig()
    config.demos.abstract_factory.orders = [
        WatchOrderConfig(size="38mm", band="Milanese", material="Titanium"),
    ]
    with pytest.raises(ValueError, match="Unknown MaterialType 'Titanium'"):
        _validate_config(config)


def test_validate_config_unknown_builder():
    config = AppConfig()
    config.demos.builder.builders = ["hungry-hungarian"]
    with pytest.raises(ValueError, match="unknown meal builder"):
        _validate_config(config)


def test_load_config_missing_file(tmp_path):
    """Loading from a missing file should return defaults."""
    config = load_config(tmp_path / "nonexistent.yaml")
    assert config.selected_demos == known_demos()


def test_load_config_empty_file(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("")
    config = load_config(config_path)
    assert config.selected_demos == known_demos()


def test_load_config_from_file(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({
        "demos": {
            "enabled": "factory-method",
            "factory_method": {"shapes": ["square", "circle"]},
        },
    }))
    config = load_config(config_path)
    assert config.selected_demos == ["factory-method"]
    assert config.demos.factory_method.shapes == ["square", "circle"]


def test_load_config_demos_override(tmp_path):
    """CLI --demos should override the configured selection."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"demos": {"enabled": "prototype"}}))
    config = load_config(config_path, demos=["builder", "singleton"])
    assert config.selected_demos == ["builder", "singleton"]


def test_load_config_invalid_file(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"demos": {"enabled": "visitor"}}))
    with pytest.raises(ValueError, match="unknown demo 'visitor'"):
        load_config(config_path)


def test_load_config_order_missing_key(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({
        "demos": {"abstract_factory": {"orders": [{"size": "38mm", "band": "Milanese"}]}},
    }))
    with pytest.raises(ValueError, match="needs size, band and material"):
        load_config(config_path)


def test_parse_order_not_a_mapping():
    with pytest.raises(ValueError, match="needs size, band and material"):
        _parse_config({"demos": {"abstract_factory": {"orders": ["38mm Milanese Gold"]}}})


def test_parse_orders_not_a_list():
    with pytest.raises(ValueError, match="abstract_factory.orders must be a list"):
        _parse_config({"demos": {"abstract_factory": {"orders": {"size": "38mm"}}}})


def test_parse_scalar_shape_is_one_item_list():
    config = _parse_config({"demos": {"factory_method": {"shapes": "circle"}}})
    assert config.demos.factory_method.shapes == ["circle"]
    _validate_config(config)


def test_parse_scalar_builder_is_one_item_list():
    config = _parse_config({"demos": {"builder": {"builders": "jolly-vegetarian"}}})
    assert config.demos.builder.builders == ["jolly-vegetarian"]
    _validate_config(config)


def test_parse_unknown_scalar_shape_reports_whole_name():
    config = _parse_config({"demos": {"factory_method": {"shapes": "hexagon"}}})
    with pytest.raises(ValueError, match="Unknown ShapeType 'hexagon'"):
        _validate_config(config)
