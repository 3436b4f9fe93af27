"""
Build orchestration for inkwell.

This module coordinates a full static build:
1. Set up logging
2. Build the content context (store, repositories, draft policy)
3. Generate props for every route
4. Render pages and write them (plus optional JSON props) to disk

Props for every route are generated before anything is written, so a
failing route leaves no partial site behind.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.console import Console

from .config import AppConfig
from .core.errors import InkwellError
from .logging_utils import log_event, log_failure, setup_logging
from .output.renderer import render_page, write_props
from .pages import (
    BuildContext,
    get_blog_props,
    get_blogpost_paths,
    get_blogpost_props,
    get_collection_paths,
    get_collection_props,
    get_collections_props,
)
from .rendering import Breadcrumb


@dataclass
class PageJob:
    """One page to write.

    Attributes:
        route: Route path, e.g. "/blog/hello"
        template: Template filename
        props: Page props returned by the route's generator
        extra: Extra template context that is not part of the props
    """
    route: str
    template: str
    props: dict[str, Any]
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def relative_dir(self) -> Path:
        return Path(self.route.strip("/"))


@dataclass
class BuildStats:
    """Statistics collected during a build.

    Attributes:
        routes: Number of routed pages generated from content (the 404 page is
            not a route and is not counted here)
        pages: Number of HTML pages written, including 404.html
        articles: Number of articles in the blog listing
        drafts_included: Whether drafts were visible in this build
        written: Paths of every HTML page written, 404.html last
    """
    routes: int = 0
    pages: int = 0
    articles: int = 0
    drafts_included: bool = False
    written: list[Path] = field(default_factory=list)


async def generate_pages(ctx: BuildContext, cfg: AppConfig, logger: logging.Logger | None = None) -> list[PageJob]:
    """Run every page generator and return the pages to write, in route order."""
    base = cfg.site.base_url.rstrip("/")
    jobs: list[PageJob] = []

    blog = await get_blog_props(ctx)
    jobs.append(PageJob(route="/blog", template="blog.html", props=blog))
    log_event(logger, "Route generated", event="route_generated", route="/blog", articles=len(blog["articles"]))

    slugs = await get_blogpost_paths(ctx)
    posts = await asyncio.gather(*(get_blogpost_props(ctx, slug) for slug in slugs))
    trail = [Breadcrumb("Home", f"{base}/"), Breadcrumb("Blog", f"{base}/blog/")]
    for slug, props in zip(slugs, posts):
        jobs.append(PageJob(route=f"/blog/{slug}", template="post.html", props=props, extra={"breadcrumbs": trail}))
    log_event(logger, "Route generated", event="route_generated", route="/blog/<slug>", pages=len(slugs))

    jobs.append(PageJob(route="/collections", template="collections.html", props=await get_collections_props(ctx)))
    collection_slugs = await get_collection_paths(ctx)
    for slug in collection_slugs:
        props = await get_collection_props(ctx, slug)
        jobs.append(PageJob(route=f"/collections/{slug}", template="collection.html", props=props))
    log_event(
        logger,
        "Route generated",
        event="route_generated",
        route="/collections/<slug>",
        pages=len(collection_slugs),
    )

    return jobs


def run_build(
    cfg: AppConfig,
    output_dir: Path | None = None,
    drafts: bool | None = None,
    console: Console | None = None,
) -> BuildStats:
    """Build the whole site into `output_dir`.

    Args:
        cfg: Application configuration
        output_dir: Destination directory (defaults to `cfg.output.directory`)
        drafts: Override the draft visibility derived from the build mode
        console: Optional rich console for the summary line

    Returns:
        BuildStats for the finished build

    Raises:
        InkwellError: Content could not be loaded, looked up or converted
    """
    output_dir = Path(output_dir or cfg.output.directory)
    logger = setup_logging(cfg.logging, output_dir, mode=cfg.site.mode)
    ctx = BuildContext.from_config(cfg, drafts=drafts)

    log_event(
        logger,
        "Build start",
        event="build_start",
        drafts=ctx.drafts,
        content=str(ctx.store.directory),
    )

    try:
        jobs = asyncio.run(generate_pages(ctx, cfg, logger))
    except InkwellError as exc:
        log_failure(logger, exc)
        raise

    stats = BuildStats(drafts_included=ctx.drafts, routes=len(jobs))
    site = {"title": cfg.site.title, "mode": cfg.site.mode}
    base = cfg.site.base_url.rstrip("/")
    for job in jobs:
        target = output_dir / job.relative_dir
        path = render_page(job.template, target / "index.html", site=site, base=base, **job.props, **job.extra)
        stats.written.append(path)
        if cfg.output.write_props:
            write_props(job.props, target / "props.json")
        log_event(logger, "Page written", event="page_written", route=job.route, path=str(path))
        if job.route == "/blog":
            stats.articles = len(job.props["articles"])

    stats.written.append(render_page("404.html", output_dir / "404.html", site=site, base=base))
    stats.pages = len(stats.written)

    if console is not None:
        _render_build_stats(stats, console)
    log_event(logger, "Build finished", event="build_finished", pages=stats.pages, articles=stats.articles)
    return stats


def _render_build_stats(stats: BuildStats, console: Console) -> None:
    console.print(
        "[bold]Build summary[/bold]: "
        f"routes={stats.routes}, pages={stats.pages}, articles={stats.articles}, "
        f"drafts={'shown' if stats.drafts_included else 'hidden'}"
    )
