"""Domain exceptions for reviews app."""


class ReviewsServiceError(Exception):
    """Base exception for all reviews service errors."""
    pass


class ReviewNotFoundError(ReviewsServiceError):
    """Review does not exist."""
    pass


class UnauthorizedReviewActionError(ReviewsServiceError):
    """User cannot modify this review."""
    pass


class AlreadyHeartedError(ReviewsServiceError):
    """Member has already hearted this review."""
    pass


class HeartNotFoundError(ReviewsServiceError):
    """Member has not hearted this review."""
    pass
