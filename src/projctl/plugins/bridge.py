"""Store listener that forwards change notifications to plugin hooks.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from projctl.domain.projects import ProjectRecord
    from projctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class PluginBridge:
    """Callable listener: ``store.add_listener(PluginBridge(pm))``.

    Each snapshot is handed to ``post_add_project``; the newest record is
    the last item of the snapshot.
    """

    def __init__(self, plugin_manager: PluginManager) -> None:
        self._pm = plugin_manager
        self.failures: list[str] = []

    def __call__(self, projects: list[ProjectRecord]) -> None:
        if not projects:
            return
        payload = [p.to_dict() for p in projects]
        self._call("post_add_project", project=payload[-1], projects=payload)

    def dispatch_batch(self, added: int, failed: int) -> None:
        """Report a finished batch import to plugins."""
        self._call("post_batch", added=added, failed=failed)

    def _call(self, hook_name: str, **kwargs: object) -> None:
        hook_fn = getattr(self._pm.hook, hook_name)
        try:
            hook_fn(**kwargs)
        except Exception:
            logger.warning("Plugin hook %s failed", hook_name, exc_info=True)
            self.failures.append(hook_name)
