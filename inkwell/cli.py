"""
Command-line interface for inkwell.

Uses Typer to provide `build` (generate the static site) and `check`
(validate the Content Store without writing anything).
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console

from .config import load_config, validate_mode
from .core.errors import InkwellError
from .pages import BuildContext
from .runner import run_build

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def build(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    output: Path | None = typer.Option(None, "--output", "-o"),
    content: Path | None = typer.Option(None, "--content", help="Content Store directory."),
    mode: str | None = typer.Option(
        None, "--mode", "-m", help="Build mode: development, production or test."
    ),
    drafts: bool | None = typer.Option(
        None, "--drafts/--no-drafts", help="Show or hide drafts regardless of the mode."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
    props: bool | None = typer.Option(
        None, "--props/--no-props", help="Write each route's JSON props next to its page."
    ),
):
    """Generate the static site.

    Args:
        config: Optional path to YAML config file
        output: Directory for generated pages
        content: Content Store directory
        mode: Build mode (development shows drafts)
        drafts: Explicit draft visibility override
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Enable/disable file logging
        props: Enable/disable JSON props output
    """
    cfg = load_config(str(config) if config else None)

    if mode:
        cfg.site.mode = validate_mode(mode)
    if content is not None:
        cfg.content.directory = str(content)
    if output is not None:
        cfg.output.directory = str(output)
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file
    if props is not None:
        cfg.output.write_props = props

    try:
        stats = run_build(cfg, drafts=drafts, console=console)
    except InkwellError as exc:
        console.print(f"[bold red]Build failed[/bold red]: {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"Site generated: {cfg.output.directory} ({stats.pages} pages)")


@app.command()
def check(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    content: Path | None = typer.Option(None, "--content", help="Content Store directory."),
):
    """Load and validate the Content Store, then print what it holds."""
    cfg = load_config(str(config) if config else None)
    if content is not None:
        cfg.content.directory = str(content)

    ctx = BuildContext.from_config(cfg, drafts=True)

    async def _count() -> tuple[int, int, int]:
        collections = await ctx.collections.all()
        posts = await ctx.blogposts.all(ctx.list_options)
        return len(collections), len(posts), sum(1 for post in posts if post.draft)

    try:
        collections, posts, drafts = asyncio.run(_count())
    except InkwellError as exc:
        console.print(f"[bold red]Invalid content[/bold red]: {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"collections={collections}, posts={posts}, drafts={drafts}")


if __name__ == "__main__":
    app()
