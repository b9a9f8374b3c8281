"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. It holds the one project store for the process and
hands it to services by reference. Plugins are wired in lazily so
``--help`` never triggers entry-point discovery.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from projctl.output.formatters import OutputSettings, format_result
from projctl.services.store import get_store

if TYPE_CHECKING:
    from projctl.config.settings import ProjSettings
    from projctl.plugins.bridge import PluginBridge
    from projctl.services.project import ProjectService
    from projctl.services.result import ServiceResult
    from projctl.services.store import ProjectStore

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ProjSettings, store: ProjectStore | None = None) -> None:
        self.settings = settings
        self.store = store if store is not None else get_store()
        self._bridge: PluginBridge | None = None
        self._plugins_connected = False

        from projctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def interactive(self) -> bool:
        """Prompts are allowed: no ``--no-interact`` and no ``--json``."""
        return not self.settings.no_interact and not self.settings.json_output

    def project_service(self) -> ProjectService:
        """A ProjectService bound to this context's store and form rules."""
        from projctl.services.project import ProjectService

        return ProjectService(self.store, self.settings.form)

    def connect_plugins(self) -> PluginBridge | None:
        """Load plugins and register the plugin bridge as a store listener.

        Runs at most once per context. Returns None when plugins are disabled.
        """
        if self._plugins_connected:
            return self._bridge
        self._plugins_connected = True
        if not self.settings.plugins.enabled:
            return None

        from projctl.plugins.bridge import PluginBridge
        from projctl.plugins.manager import PluginManager

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=self.settings.local_plugin_dir)
        logger.debug("Loaded plugins: %s", names)
        self._bridge = PluginBridge(pm)
        self.store.add_listener(self._bridge)
        return self._bridge

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        if self._bridge is not None and self._bridge.failures:
            warnings = [f"Plugin hook {name} failed" for name in self._bridge.failures]
            self._bridge.failures.clear()
            result = result.model_copy(update={"warnings": [*result.warnings, *warnings]})

        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
