"""Review management service - CRUD operations for reviews."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.musicals.services import get_musical, get_theater_seat
from apps.reviews.models import Review
from apps.reviews.serializers import ReviewRequestSerializer
from .exceptions import ReviewNotFoundError, UnauthorizedReviewActionError
from .heart_management import annotate_hearts
from .review_builder import build_review, apply_review_update

logger = logging.getLogger(__name__)


def _review_queryset() -> QuerySet[Review]:
    return Review.objects.select_related(
        'author',
        'musical',
        'theater_seat',
    ).prefetch_related('files', 'tag_links__tag')


def validate_review_payload(payload: dict) -> dict:
    """
    Validate a raw review payload.

    Raises:
        rest_framework.exceptions.ValidationError: If payload is invalid
    """
    serializer = ReviewRequestSerializer(data=payload)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


@transaction.atomic
def create_review(*, author: User, musical_id: UUID, payload: dict) -> Review:
    """
    Create a new review for a musical.

    This operation:
    1. Validates the payload
    2. Looks up the musical and the seat in its theater
    3. Builds the review with files and tags atomically

    Args:
        author: Member writing the review
        musical_id: UUID of musical being reviewed
        payload: Raw review payload (see ReviewRequestSerializer)

    Returns:
        Created Review instance

    Raises:
        ValidationError: If payload is invalid
        MusicalNotFoundError: If musical doesn't exist
        TheaterSeatNotFoundError: If seat isn't in the musical's theater
    """
    data = validate_review_payload(payload)

    musical = get_musical(musical_id=musical_id)
    seat = get_theater_seat(
        musical=musical,
        floor=data['floor'],
        section=data['section'],
        row=data['row'],
        seat=data['seat'],
    )

    review = build_review(author=author, seat=seat, musical=musical, payload=data)

    logger.info("Member %s created review %s for musical %s", author.id, review.id, musical.id)
    return review


def get_review_by_id(*, review_id: UUID) -> Review:
    """
    Retrieve a review by ID.

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    try:
        review = _review_queryset().get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    return review


def get_review_detail(*, review_id: UUID, viewer: Optional[User] = None) -> tuple[Review, bool]:
    """
    Retrieve a review together with the viewer's heart state.

    Returns:
        Tuple of (review, liked)

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    review = get_review_by_id(review_id=review_id)
    return annotate_hearts([review], viewer)[0]


@transaction.atomic
def update_review(
    *,
    review_id: UUID,
    user: User,
    musical_id: UUID,
    payload: dict
) -> Review:
    """
    Update an existing review.

    Only the review author can update their review. Tags are replaced by
    the payload's tag set; image URLs are appended to existing files.

    Args:
        review_id: UUID of review to update
        user: User making the update (must be author)
        musical_id: UUID of musical the review is for
        payload: Raw review payload (see ReviewRequestSerializer)

    Returns:
        Updated Review instance

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
        ValidationError: If payload is invalid
        MusicalNotFoundError: If musical doesn't exist
        TheaterSeatNotFoundError: If seat isn't in the musical's theater
    """
    # Get review with row lock
    try:
        review = (
            Review.objects
            .select_for_update()
            .get(id=review_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    # Check authorization
    if review.author_id != user.id:
        logger.warning("Member %s tried to update review %s of another member", user.id, review.id)
        raise UnauthorizedReviewActionError(
            "You can only update your own reviews"
        )

    data = validate_review_payload(payload)

    musical = get_musical(musical_id=musical_id)
    seat = get_theater_seat(
        musical=musical,
        floor=data['floor'],
        section=data['section'],
        row=data['row'],
        seat=data['seat'],
    )

    review = apply_review_update(review=review, seat=seat, musical=musical, payload=data)

    logger.info("Member %s updated review %s", user.id, review.id)
    return review


@transaction.atomic
def delete_review(*, review_id: UUID, user: User) -> None:
    """
    Delete a review.

    Only the review author can delete their review. Files, tag links and
    hearts go with it; tags themselves are kept.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
    """
    try:
        review = (
            Review.objects
            .select_for_update()
            .get(id=review_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    if review.author_id != user.id:
        logger.warning("Member %s tried to delete review %s of another member", user.id, review.id)
        raise UnauthorizedReviewActionError(
            "You can only delete your own reviews"
        )

    review.delete()
    logger.info("Member %s deleted review %s", user.id, review_id)


def get_musical_reviews(
    *,
    musical_id: UUID,
    viewer: Optional[User] = None,
    grade: Optional[str] = None,
    floor: Optional[str] = None,
    section: Optional[str] = None,
    tag: Optional[str] = None
) -> list[tuple[Review, bool]]:
    """
    Get all reviews of a musical with the viewer's heart state.

    Args:
        musical_id: UUID of musical
        viewer: Member viewing the list, or None for anonymous
        grade: Filter by seat grade
        floor: Filter by seat floor
        section: Filter by seat section
        tag: Filter by exact tag name

    Returns:
        List of (review, liked) tuples, newest first
    """
    queryset = _review_queryset().filter(musical_id=musical_id)

    if grade:
        queryset = queryset.filter(grade=grade)

    if floor:
        queryset = queryset.filter(theater_seat__floor=floor)

    if section:
        queryset = queryset.filter(theater_seat__section=section)

    if tag:
        queryset = queryset.filter(tag_links__tag__name=tag)

    return annotate_hearts(queryset.order_by('-created_at'), viewer)


def get_recent_reviews(*, limit: int = 10) -> QuerySet[Review]:
    """Get the newest reviews across all musicals, for the live feed."""
    return _review_queryset().order_by('-created_at')[:limit]
