"""Heart management service - Members liking reviews."""

import logging
from collections.abc import Iterable
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.reviews.models import Review, ReviewHeart
from .exceptions import (
    ReviewNotFoundError,
    AlreadyHeartedError,
    HeartNotFoundError,
)

logger = logging.getLogger(__name__)


def annotate_hearts(
    reviews: Iterable[Review],
    viewer: Optional[User] = None
) -> list[tuple[Review, bool]]:
    """
    Pair each review with whether the viewer has hearted it.

    Anonymous viewers get ``False`` for every review without touching the
    database. Otherwise one query fetches the viewer's hearts among the
    given reviews. Input order is kept.

    Args:
        reviews: Reviews to annotate (list or QuerySet)
        viewer: Member viewing the reviews, or None for anonymous

    Returns:
        List of (review, liked) tuples
    """
    reviews = list(reviews)

    if viewer is None or not reviews:
        return [(review, False) for review in reviews]

    hearted_ids = set(
        ReviewHeart.objects
        .filter(member=viewer, review__in=reviews)
        .values_list('review_id', flat=True)
    )

    return [(review, review.id in hearted_ids) for review in reviews]


@transaction.atomic
def heart_review(*, review_id: UUID, member: User) -> ReviewHeart:
    """
    Heart a review.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        AlreadyHeartedError: If member already hearted this review
    """
    try:
        review = Review.objects.get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    if ReviewHeart.objects.filter(review=review, member=member).exists():
        raise AlreadyHeartedError("You have already hearted this review")

    try:
        with transaction.atomic():
            heart = ReviewHeart.objects.create(review=review, member=member)
    except IntegrityError:
        # Concurrent request inserted the same heart
        raise AlreadyHeartedError("You have already hearted this review")

    logger.info("Member %s hearted review %s", member.id, review.id)
    return heart


@transaction.atomic
def unheart_review(*, review_id: UUID, member: User) -> None:
    """
    Remove a member's heart from a review.

    Raises:
        HeartNotFoundError: If member has not hearted this review
    """
    deleted, _ = ReviewHeart.objects.filter(review_id=review_id, member=member).delete()

    if not deleted:
        raise HeartNotFoundError("You have not hearted this review")

    logger.info("Member %s removed heart from review %s", member.id, review_id)
