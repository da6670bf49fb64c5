"""Command runner for coordinating CLI execution.

Configures logging, creates components and maps failures to `click.Abort`.
"""

from __future__ import annotations

import click

from ClaimSearch.cli.commands import CompileCommand
from ClaimSearch.config import AppConfig
from ClaimSearch.core.request import SearchRequest
from ClaimSearch.services import create_search_service
from ClaimSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_compile(
        self,
        action: str,
        request: SearchRequest,
        *,
        size: int | None = None,
        offset: int = 0,
    ) -> None:
        """Compile ``request`` and print the search body to stdout.

        Args:
            action: The CLI command name (e.g., 'compile').
            request: Request assembled from CLI options.
            size: Optional page size override.
            offset: Number of hits to skip.

        Raises:
            click.Abort: When compilation fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            command = CompileCommand(config=self.config, search_service=create_search_service(self.config))
            output = command.execute(request, size=size, offset=offset)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Compile failed: %s", e)
            raise click.Abort from e
        click.echo(output)
