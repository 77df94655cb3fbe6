"""Domain exceptions for musicals app."""


class MusicalsServiceError(Exception):
    """Base exception for all musicals service errors."""
    pass


class MusicalNotFoundError(MusicalsServiceError):
    """Musical does not exist."""
    pass


class TheaterSeatNotFoundError(MusicalsServiceError):
    """Seat does not exist in the musical's theater."""
    pass
