"""Musical lookup service - resolves identifiers to musicals and seats."""

from uuid import UUID

from apps.musicals.models import Musical, TheaterSeat
from .exceptions import MusicalNotFoundError, TheaterSeatNotFoundError


def get_musical(*, musical_id: UUID) -> Musical:
    """
    Retrieve a musical by ID.

    Args:
        musical_id: UUID of musical

    Returns:
        Musical instance with its theater loaded

    Raises:
        MusicalNotFoundError: If musical doesn't exist
    """
    try:
        musical = Musical.objects.select_related('theater').get(id=musical_id)
    except Musical.DoesNotExist:
        raise MusicalNotFoundError("Musical not found")

    return musical


def get_theater_seat(
    *,
    musical: Musical,
    floor: str,
    section: str,
    row: str,
    seat: int
) -> TheaterSeat:
    """
    Find a seat in the theater where the musical is staged.

    A seat is only valid for a musical if it belongs to the same theater,
    so the lookup is scoped by ``musical.theater_id``.

    Raises:
        TheaterSeatNotFoundError: If no such seat exists in that theater
    """
    try:
        theater_seat = TheaterSeat.objects.get(
            theater_id=musical.theater_id,
            floor=floor,
            section=section,
            seat_row=row,
            seat=seat,
        )
    except TheaterSeat.DoesNotExist:
        raise TheaterSeatNotFoundError(
            f"Seat {floor} {section}-{row}-{seat} not found in this theater"
        )

    return theater_seat
