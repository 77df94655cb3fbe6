"""
Review aggregate builder.

A review aggregate is a Review plus its ordered files and its tag links.
These functions are the only place files and tag links are created; both
assume the seat and musical were already validated by the caller.
"""

from django.db import transaction
from django.db.models import Max

from apps.accounts.models import User
from apps.musicals.models import Musical, TheaterSeat
from apps.reviews.models import Review, ReviewFile, ReviewTag, Tag
from .tag_management import resolve_tags

REVIEW_FIELDS = (
    'grade',
    'gap_score',
    'sight_score',
    'sound_score',
    'light_score',
    'content',
    'opera_glass',
    'block',
)


def _review_fields(payload: dict) -> dict:
    return {field: payload[field] for field in REVIEW_FIELDS if field in payload}


def _attach_files(review: Review, img_urls: list[str]) -> list[ReviewFile]:
    """Append one file per URL after the review's existing files."""
    if not img_urls:
        return []

    last_position = review.files.aggregate(last=Max('position'))['last']
    start = 0 if last_position is None else last_position + 1

    return ReviewFile.objects.bulk_create([
        ReviewFile(review=review, file_path=path, position=start + offset)
        for offset, path in enumerate(img_urls)
    ])


def _attach_tags(review: Review, tags: set[Tag]) -> None:
    """Create links for tags the review is not yet linked to."""
    linked_tag_ids = set(
        ReviewTag.objects
        .filter(review=review, tag__in=tags)
        .values_list('tag_id', flat=True)
    )

    ReviewTag.objects.bulk_create([
        ReviewTag(review=review, tag=tag)
        for tag in tags
        if tag.id not in linked_tag_ids
    ])


@transaction.atomic
def build_review(
    *,
    author: User,
    seat: TheaterSeat,
    musical: Musical,
    payload: dict
) -> Review:
    """
    Create a review with its files and tag links.

    The review row is saved first so files and links can reference it.
    Image URLs keep their order and duplicates; tags are deduplicated.

    Args:
        author: Member writing the review
        seat: Seat the review was written from
        musical: Musical being reviewed
        payload: Validated review payload

    Returns:
        Created Review instance
    """
    tags = resolve_tags(payload.get('tags', ''))

    review = Review.objects.create(
        author=author,
        musical=musical,
        theater_seat=seat,
        **_review_fields(payload),
    )

    _attach_files(review, payload.get('img_urls', []))
    _attach_tags(review, tags)

    return review


@transaction.atomic
def apply_review_update(
    *,
    review: Review,
    seat: TheaterSeat,
    musical: Musical,
    payload: dict
) -> Review:
    """
    Apply an edit to an existing review in place.

    Files are additive: new URLs are appended and existing files are kept.

    Tags are replaced as a whole. The previous links are captured first,
    then links for the new set are attached, and only then are previous
    links whose tag is no longer present deleted. A tag present before and
    after the edit keeps its original link row.

    Authorship must be checked by the caller.
    """
    tags = resolve_tags(payload.get('tags', ''))

    review.musical = musical
    review.theater_seat = seat
    for field, value in _review_fields(payload).items():
        setattr(review, field, value)
    review.save()

    _attach_files(review, payload.get('img_urls', []))

    previous_links = list(ReviewTag.objects.filter(review=review))
    _attach_tags(review, tags)

    new_tag_ids = {tag.id for tag in tags}
    stale_link_ids = [link.id for link in previous_links if link.tag_id not in new_tag_ids]
    if stale_link_ids:
        ReviewTag.objects.filter(id__in=stale_link_ids).delete()

    return review
