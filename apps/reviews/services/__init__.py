"""
Reviews services - Business logic layer.

This package contains all business operations for the reviews app:
- Review CRUD operations
- Review aggregate building (files and tag links)
- Tag resolution and suggestions
- Hearts
"""

from .review_management import (
    create_review,
    get_review_by_id,
    get_review_detail,
    update_review,
    delete_review,
    get_musical_reviews,
    get_recent_reviews,
)

from .review_builder import (
    build_review,
    apply_review_update,
)

from .tag_management import (
    resolve_tags,
    get_popular_tags,
    search_tags,
)

from .heart_management import (
    annotate_hearts,
    heart_review,
    unheart_review,
)

# Domain Exceptions
from .exceptions import (
    ReviewsServiceError,
    ReviewNotFoundError,
    UnauthorizedReviewActionError,
    AlreadyHeartedError,
    HeartNotFoundError,
)

__all__ = [
    # Review Management Services
    'create_review',
    'get_review_by_id',
    'get_review_detail',
    'update_review',
    'delete_review',
    'get_musical_reviews',
    'get_recent_reviews',
    # Aggregate Builder
    'build_review',
    'apply_review_update',
    # Tag Services
    'resolve_tags',
    'get_popular_tags',
    'search_tags',
    # Heart Services
    'annotate_hearts',
    'heart_review',
    'unheart_review',
    # Exceptions
    'ReviewsServiceError',
    'ReviewNotFoundError',
    'UnauthorizedReviewActionError',
    'AlreadyHeartedError',
    'HeartNotFoundError',
]
