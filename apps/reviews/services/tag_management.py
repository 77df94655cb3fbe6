"""Tag management service - Free-text tags for musical reviews."""

import logging
import re

from django.db.models import QuerySet, Count

from apps.reviews.models import Tag

logger = logging.getLogger(__name__)

TAG_SEPARATOR = re.compile(r',\s*')


def split_tag_names(raw_tags: str) -> list[str]:
    """
    Split a comma separated tag string into distinct, trimmed names.

    Empty tokens are dropped. First occurrence order is kept.

    Example:
        >>> split_tag_names("musical, classic,, musical ")
        ['musical', 'classic']
    """
    names = []
    seen = set()
    for token in TAG_SEPARATOR.split(raw_tags or ''):
        name = token.strip()
        if name and name not in seen:
            seen.add(name)
            names.append(name)
    return names


def resolve_tags(raw_tags: str) -> set[Tag]:
    """
    Turn a free-text tag string into a set of persisted tags.

    This operation:
    1. Splits on commas and trims each token
    2. Looks up all names in a single query
    3. Creates a Tag for each name not found

    Malformed input never raises: empty tokens are ignored and any other
    token is a valid tag name.

    Creation goes through ``get_or_create`` so that a concurrent caller
    inserting the same name first is picked up instead of failing on the
    unique constraint.

    Args:
        raw_tags: Comma separated tag names, e.g. "musical, classic"

    Returns:
        Set of Tag instances, one per distinct name
    """
    names = split_tag_names(raw_tags)
    if not names:
        return set()

    tags = set(Tag.objects.filter(name__in=names))
    existing_names = {tag.name for tag in tags}

    for name in names:
        if name in existing_names:
            continue

        tag, created = Tag.objects.get_or_create(name=name)
        if created:
            logger.info("Created tag %r", name)
        tags.add(tag)

    return tags


def get_popular_tags(*, limit: int = 20) -> QuerySet[Tag]:
    """
    Get most frequently used tags.

    Returns tags ordered by how many reviews link to them.
    Useful for suggesting tags while a review is being written.

    Args:
        limit: Maximum number of tags to return (default: 20)

    Returns:
        QuerySet of Tag instances annotated with 'usage_count',
        ordered by usage count descending
    """
    return (
        Tag.objects
        .annotate(usage_count=Count('review_links'))
        .filter(usage_count__gt=0)  # Only tags actually used
        .order_by('-usage_count', 'name')[:limit]
    )


def search_tags(*, search: str = '') -> QuerySet[Tag]:
    """
    Search tags by name (case-insensitive), for autocomplete.

    Returns:
        QuerySet of matching Tag instances ordered by name
    """
    queryset = Tag.objects.all()

    if search:
        queryset = queryset.filter(name__icontains=search)

    return queryset.order_by('name')
