"""Tests for the MonsterBoss singleton."""

import threading
import time

import pytest

from creational_patterns.config import AppConfig
from creational_patterns.patterns.singleton import DEFAULT_BOSS_NAME, MonsterBoss, run_demo


@pytest.fixture(autouse=True)
def fresh_boss():
    MonsterBoss._reset()
    yield
    MonsterBoss._reset()


def test_shared_instance_identity():
    assert MonsterBoss.shared_instance() is MonsterBoss.shared_instance()


def test_default_name():
    assert MonsterBoss.shared_instance().name == DEFAULT_BOSS_NAME


def test_mutation_visible_through_other_reference():
    boss = MonsterBoss.shared_instance()
    boss.name = "🦀"
    assert MonsterBoss.shared_instance().name == "🦀"


def test_direct_construction_is_rejected():
    with pytest.raises(TypeError, match="shared_instance"):
        MonsterBoss()


def test_direct_construction_with_wrong_token_is_rejected():
    with pytest.raises(TypeError):
        MonsterBoss(object())


def test_lazy_initialization():
    assert MonsterBoss._instance is None
    MonsterBoss.shared_instance()
    assert MonsterBoss._instance is not None


def test_concurrent_first_access_initializes_once(monkeypatch):
    init_calls = []
    original_init = MonsterBoss.__init__

    def slow_init(self, *args, **kwargs):
        init_calls.append(threading.get_ident())
        time.sleep(0.01)
        original_init(self, *args, **kwargs)

    monkeypatch.setattr(MonsterBoss, "__init__", slow_init)

    barrier = threading.Barrier(16)
    seen = []

    def worker():
        barrier.wait()
        seen.append(MonsterBoss.shared_instance())

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(init_calls) == 1
    assert len(seen) == 16
    assert all(boss is seen[0] for boss in seen)


def test_initialization_is_logged(caplog):
    caplog.set_level("INFO", logger="creational_patterns.patterns.singleton")
    MonsterBoss.shared_instance()
    MonsterBoss.shared_instance()
    messages = [r.getMessage() for r in caplog.records]
    assert messages.count(f"Singleton {DEFAULT_BOSS_NAME} is initialized") == 1


def test_run_demo_defaults():
    assert run_demo(AppConfig()) == ["🦀"]
    assert MonsterBoss.shared_instance().name == "🦀"
