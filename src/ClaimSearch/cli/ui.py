"""Click CLI interface definitions."""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from ClaimSearch.cli.runner import CommandRunner
from ClaimSearch.config import load_config
from ClaimSearch.config.app import DEFAULT_CONFIG_PATH
from ClaimSearch.core.request import SearchRequest


@click.group(help="ClaimSearch: compile content search requests into engine queries.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.
    """
    load_dotenv()
    ctx.obj = load_config(config_path)


@cli.command("compile")
@click.argument("s")
@click.option("--media-type", default=None, help="Comma-separated media families, e.g. video,audio.")
@click.option("--content-type", default=None, help="Comma-separated content types, e.g. video/mp4.")
@click.option("--claim-type", default=None, help="channel or file.")
@click.option("--channel-id", default=None, help="Claim id of the owning channel.")
@click.option("--channel", default=None, help="Channel name pattern.")
@click.option("--claim-id", default=None, help="Exact claim id.")
@click.option("--nsfw", type=click.BOOL, default=None, help="Restrict by NSFW flag (true/false); unset means no restriction.")
@click.option("--size", type=click.IntRange(min=1), default=None, help="Page size (defaults to search.size).")
@click.option("--from", "offset", type=click.IntRange(min=0), default=0, show_default=True, help="Hits to skip.")
@click.pass_context
def compile_cmd(
    ctx: click.Context,
    s: str,
    media_type: str | None,
    content_type: str | None,
    claim_type: str | None,
    channel_id: str | None,
    channel: str | None,
    claim_id: str | None,
    nsfw: bool | None,
    size: int | None,
    offset: int,
) -> None:
    """Compile S into a search body and print it as JSON."""
    request = SearchRequest(
        s=s,
        media_type=media_type,
        content_type=content_type,
        claim_type=claim_type,
        channel_id=channel_id,
        channel=channel,
        nsfw=nsfw,
        claim_id=claim_id,
    )
    runner = CommandRunner(ctx.obj)
    runner.run_compile(ctx.command.name, request, size=size, offset=offset)
