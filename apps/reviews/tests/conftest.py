import pytest
from apps.accounts.models import User
from apps.musicals.models import Musical, Theater, TheaterSeat, FloorType
from apps.reviews.models import Review, ReviewFile, ReviewTag, ReviewHeart, Tag


@pytest.fixture
def review_user(db):
    """Create and return a test member who writes reviews."""
    return User.objects.create_user(
        email='reviewer@example.com',
        password='TestPass123!',
        nickname='Musical Reviewer',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return another test member."""
    return User.objects.create_user(
        email='review_other@example.com',
        password='TestPass123!',
        nickname='Review Other User',
    )


@pytest.fixture
def review_theater(db):
    """Create and return a test theater."""
    return Theater.objects.create(
        name='Daehakro Art Theater',
        address='Seoul, Jongno-gu',
    )


@pytest.fixture
def review_other_theater(db):
    """Create and return a second theater."""
    return Theater.objects.create(
        name='Chungmu Arts Center',
        address='Seoul, Jung-gu',
    )


@pytest.fixture
def review_seat(db, review_theater):
    """Create a first floor seat in the test theater."""
    return TheaterSeat.objects.create(
        theater=review_theater,
        floor=FloorType.FIRST,
        section='A',
        seat_row='3',
        seat=12,
    )


@pytest.fixture
def review_second_floor_seat(db, review_theater):
    """Create a second floor seat in the test theater."""
    return TheaterSeat.objects.create(
        theater=review_theater,
        floor=FloorType.SECOND,
        section='B',
        seat_row='1',
        seat=4,
    )


@pytest.fixture
def review_other_theater_seat(db, review_other_theater):
    """Create a seat that belongs to a different theater."""
    return TheaterSeat.objects.create(
        theater=review_other_theater,
        floor=FloorType.FIRST,
        section='A',
        seat_row='3',
        seat=12,
    )


@pytest.fixture
def review_musical(db, review_theater):
    """Create and return a test musical."""
    return Musical.objects.create(
        title='The Last Voyage',
        theater=review_theater,
    )


@pytest.fixture
def review_payload(review_seat):
    """Return a valid review payload for the test seat."""
    return {
        'grade': 'R',
        'floor': review_seat.floor,
        'section': review_seat.section,
        'row': review_seat.seat_row,
        'seat': review_seat.seat,
        'content': 'Wonderful three person cast.',
        'img_urls': ['u1', 'u2'],
        'gap_score': 'good',
        'sight_score': 'great',
        'sound_score': 'normal',
        'light_score': 'good',
        'opera_glass': False,
        'block': False,
        'tags': 'musical, classic, musical',
    }


@pytest.fixture
def tag_classic(db):
    """Create a 'classic' tag."""
    return Tag.objects.create(name='classic')


@pytest.fixture
def tag_rewatch(db):
    """Create a 'rewatch' tag."""
    return Tag.objects.create(name='rewatch')


@pytest.fixture
def review(db, review_user, review_musical, review_seat, tag_classic):
    """Create and return a test review with one file and one tag."""
    review = Review.objects.create(
        musical=review_musical,
        theater_seat=review_seat,
        author=review_user,
        grade='R',
        gap_score='good',
        sight_score='great',
        sound_score='good',
        light_score='normal',
        content='Great view of the stage.',
    )
    ReviewFile.objects.create(review=review, file_path='https://img.example.com/a.jpg', position=0)
    ReviewTag.objects.create(review=review, tag=tag_classic)
    return review


@pytest.fixture
def other_review(db, review_other_user, review_musical, review_second_floor_seat):
    """Create a review by another member from the second floor."""
    return Review.objects.create(
        musical=review_musical,
        theater_seat=review_second_floor_seat,
        author=review_other_user,
        grade='S',
        gap_score='bad',
        sight_score='normal',
        sound_score='good',
        light_score='good',
        content='Could not see the left side.',
        block=True,
    )


@pytest.fixture
def review_heart(db, review, review_other_user):
    """Heart on the test review from the other member."""
    return ReviewHeart.objects.create(review=review, member=review_other_user)
