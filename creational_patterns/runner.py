"""Demo runner: executes the selected pattern demos and prints their output."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from rich.console import Console

from creational_patterns.config import AppConfig
from creational_patterns.demos import get_demo, get_demo_info

logger = logging.getLogger(__name__)
console = Console()


class DemoRunner:
    """Runs demos one after another.

    Each demo is a leaf: nothing it returns is fed to the next one.  A
    demo that raises stops the run.
    """

    def __init__(self, config: AppConfig, out: Optional[Console] = None) -> None:
        self._config = config
        self._console = out or console

    def run(self, names: Optional[List[str]] = None) -> Dict[str, List[str]]:
        """Run ``names`` (default: the configured selection) and return their output."""
        selected = names if names is not None else self._config.selected_demos
        results: Dict[str, List[str]] = {}

        for name in selected:
            info = get_demo_info(name)
            demo = get_demo(name)
            logger.debug("Running demo %s (%s)", name, info.target)

            if self._config.output.show_titles:
                self._console.print(f"\n[bold]{info.title}[/bold]")

            lines = demo(self._config)
            for line in lines:
                self._console.print(line, markup=False, highlight=False)
            results[name] = lines

        logger.info("Ran %d demo(s)", len(results))
        return results
