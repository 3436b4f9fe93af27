"""
Static page generators, one per route.

Each generator reads content through the repositories, converts the domain
models into transport models and returns the page props. Props contain only
dicts, lists, strings and booleans so they can be written as JSON.

Routes:
- /blog                 get_blog_props
- /blog/<slug>          get_blogpost_paths, get_blogpost_props
- /collections          get_collections_props
- /collections/<slug>   get_collection_paths, get_collection_props

Any failure propagates: a route either gets complete props or the build
fails.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable

from ..core.errors import ConversionError, InkwellError, NotFoundError
from ..core.types import ApiArticle, Blogpost
from ..repositories import CollectionRepository
from .context import BuildContext

logger = logging.getLogger(__name__)


async def convert_all(posts: Iterable[Blogpost], collections: CollectionRepository) -> list[ApiArticle]:
    """Convert posts concurrently, keeping the input order.

    The first failed conversion aborts the batch; the remaining conversions
    are cancelled and the error is raised as a ConversionError.
    """
    posts = list(posts)

    async def _convert(post: Blogpost) -> ApiArticle:
        try:
            return await post.to_api_article(collections)
        except InkwellError:
            raise
        except Exception as exc:
            raise ConversionError(post.slug, str(exc)) from exc

    tasks = [asyncio.create_task(_convert(post)) for post in posts]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


async def get_blog_props(ctx: BuildContext) -> dict[str, Any]:
    articles = await ctx.blogposts.all(ctx.list_options)
    converted = await convert_all(articles, ctx.collections)
    logger.debug("Blog listing: %d articles (drafts=%s)", len(converted), ctx.drafts)
    return {"articles": converted}


async def get_blogpost_paths(ctx: BuildContext) -> list[str]:
    """Slugs of every article that gets its own page in this build."""
    return [post.slug for post in await ctx.blogposts.all(ctx.list_options)]


async def get_blogpost_props(ctx: BuildContext, slug: str) -> dict[str, Any]:
    """Props for one article page.

    Raises:
        NotFoundError: No article has this slug, or it is a draft and drafts
            are hidden in this build
    """
    post = await ctx.blogposts.show(slug)
    if post.draft and not ctx.drafts:
        raise NotFoundError(ctx.blogposts.kind, slug)
    return {"article": await post.to_api_article(ctx.collections)}


async def get_collections_props(ctx: BuildContext) -> dict[str, Any]:
    collections = await ctx.collections.all()
    return {"collections": [collection.to_api_collection() for collection in collections]}


async def get_collection_paths(ctx: BuildContext) -> list[str]:
    return [collection.slug for collection in await ctx.collections.all()]


async def get_collection_props(ctx: BuildContext, slug: str) -> dict[str, Any]:
    """Props for one collection page: the collection and its visible articles.

    Raises:
        NotFoundError: No collection has this slug
    """
    collection = await ctx.collections.show(slug)
    posts = await ctx.blogposts.in_collection(collection.slug, ctx.list_options)
    return {
        "collection": collection.to_api_collection(),
        "articles": await convert_all(posts, ctx.collections),
    }
