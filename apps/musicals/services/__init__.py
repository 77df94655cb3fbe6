"""
Musicals services - Business logic layer.

Lookups used by the reviews app to validate the parents of a review
(musical and theater seat) before any review is written.
"""

from .musical_lookup import (
    get_musical,
    get_theater_seat,
)

from .exceptions import (
    MusicalsServiceError,
    MusicalNotFoundError,
    TheaterSeatNotFoundError,
)

__all__ = [
    # Lookup Services
    'get_musical',
    'get_theater_seat',
    # Exceptions
    'MusicalsServiceError',
    'MusicalNotFoundError',
    'TheaterSeatNotFoundError',
]
