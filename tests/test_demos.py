"""Tests for the demo registry."""

import pytest

from creational_patterns.demos import all_demo_infos, get_demo, get_demo_info, known_demos
from creational_patterns.patterns import builder, prototype


def test_known_demos_order():
    assert known_demos() == [
        "prototype",
        "factory-method",
        "singleton",
        "abstract-factory",
        "builder",
    ]


def test_get_demo_imports_entry_point():
    assert get_demo("prototype") is prototype.run_demo
    assert get_demo("builder") is builder.run_demo


def test_every_registered_demo_resolves():
    for info in all_demo_infos():
        assert callable(get_demo(info.name))
        assert info.title
        assert info.summary


def test_get_demo_unknown():
    with pytest.raises(ValueError, match="Unknown demo 'observer'"):
        get_demo("observer")


def test_get_demo_info():
    info = get_demo_info("singleton")
    assert info.name == "singleton"
    assert "Singleton" in info.title
