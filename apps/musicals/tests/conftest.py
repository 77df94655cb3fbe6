import pytest
from apps.musicals.models import Musical, Theater, TheaterSeat, FloorType


@pytest.fixture
def theater(db):
    """Create and return a test theater."""
    return Theater.objects.create(name='Daehakro Art Theater')


@pytest.fixture
def other_theater(db):
    """Create and return a second theater."""
    return Theater.objects.create(name='Chungmu Arts Center')


@pytest.fixture
def musical(db, theater):
    """Create a musical staged at the test theater."""
    return Musical.objects.create(title='The Last Voyage', theater=theater)


@pytest.fixture
def seat(db, theater):
    """Create a seat in the test theater."""
    return TheaterSeat.objects.create(
        theater=theater,
        floor=FloorType.FIRST,
        section='A',
        seat_row='3',
        seat=12,
    )


@pytest.fixture
def other_theater_seat(db, other_theater):
    """Create a seat in the other theater."""
    return TheaterSeat.objects.create(
        theater=other_theater,
        floor=FloorType.SECOND,
        section='C',
        seat_row='7',
        seat=1,
    )
