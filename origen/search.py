"""Keyword search over the component catalog."""

import logging

from origen.catalog import ComponentRegistry, get_component_registry
from origen.config import config
from origen.exceptions import InvalidOptionError
from origen.types import SearchResponse, SearchResult

logger = logging.getLogger(__name__)


def _searchable_text(key: str, spec) -> str:
    when = " ".join(spec.usage.when) if spec.usage else ""
    return f"{key} {spec.description} {when}".lower()


def search_components(
    query: str,
    limit: int = None,
    registry: ComponentRegistry = None,
) -> SearchResponse:
    """Rank components by the fraction of query terms found in their text.

    Terms are whitespace-separated and matched as substrings of the key,
    description and usage list. Entries scoring zero are dropped; ties keep
    catalog order.

    Raises:
        InvalidOptionError: ``limit`` is not an integer or is outside 1..config.search_max_limit.
    """
    if limit is None:
        limit = config.search_default_limit
    if not isinstance(limit, int) or isinstance(limit, bool):
        raise InvalidOptionError(f"limit must be an integer, got {type(limit).__name__}", option="limit")
    if not 1 <= limit <= config.search_max_limit:
        raise InvalidOptionError(
            f"limit must be between 1 and {config.search_max_limit}, got {limit}",
            option="limit",
        )
    registry = registry or get_component_registry()

    terms = query.lower().split()
    scored: list[SearchResult] = []
    for key, spec in registry:
        if not terms:
            break
        text = _searchable_text(key, spec)
        score = sum(1 for t in terms if t in text) / len(terms)
        if score > 0:
            scored.append(SearchResult(
                name=key,
                display_name=spec.name,
                description=spec.description,
                usage=list(spec.usage.when) if spec.usage else None,
                score=score,
            ))

    # sorted() is stable, so equal scores stay in catalog order
    scored = sorted(scored, key=lambda r: r.score, reverse=True)
    results = scored[:limit]
    logger.debug(f"search {query!r}: {len(scored)} hits, returning {len(results)}")
    return SearchResponse(
        query=query,
        results=results,
        count=len(results),
        has_more=len(scored) > limit,
    )
