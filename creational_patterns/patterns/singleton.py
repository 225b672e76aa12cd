"""Singleton: one lazily created, process-wide MonsterBoss.

The only way to get the boss is MonsterBoss.shared_instance().  The
first call builds it under a lock (double-checked), so concurrent first
callers still end up with the same object.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, ClassVar, List, Optional

if TYPE_CHECKING:
    from creational_patterns.config import AppConfig

logger = logging.getLogger(__name__)

DEFAULT_BOSS_NAME = "🐙"

_CONSTRUCT_TOKEN = object()


class MonsterBoss:
    """Shared boss.  Construct through shared_instance() only."""

    _instance: ClassVar[Optional[MonsterBoss]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, _token: object = None) -> None:
        if _token is not _CONSTRUCT_TOKEN:
            raise TypeError(
                "MonsterBoss cannot be constructed directly; use MonsterBoss.shared_instance()"
            )
        # other methods and properties
        self.name = DEFAULT_BOSS_NAME
        logger.info("Singleton %s is initialized", self.name)

    @classmethod
    def shared_instance(cls) -> MonsterBoss:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(_CONSTRUCT_TOKEN)
        return cls._instance

    @classmethod
    def _reset(cls) -> None:
        """Drop the shared instance.  Test use only."""
        with cls._lock:
            cls._instance = None

    def __repr__(self) -> str:
        return f"MonsterBoss(name={self.name!r})"


def run_demo(config: AppConfig) -> List[str]:
    monster_boss = MonsterBoss.shared_instance()
    monster_boss.name = config.demos.singleton.rename_to

    another_monster_boss = MonsterBoss.shared_instance()
    return [another_monster_boss.name]
