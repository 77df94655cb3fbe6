"""
Management command to generate random reviews for a musical.

Usage:
    python manage.py seed_reviews --musical <uuid> [--count 100] [--seed 42]

Reviews are written by randomly chosen members from random seats of the
musical's theater, with random grades, scores, images and tags.
"""

import random

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.accounts.models import User
from apps.musicals.models import GradeType, TheaterSeat
from apps.musicals.services import get_musical, MusicalNotFoundError
from apps.reviews.models import ScoreChoice
from apps.reviews.services import build_review

SAMPLE_CONTENT = [
    "The second act finale was worth the ticket alone.",
    "Great view of the stage, the orchestra was a little loud.",
    "Could not see the left side of the stage from here.",
    "Lighting design was stunning, especially in the storm scene.",
    "Sound was muddy on this floor, lyrics hard to follow.",
    "Bring opera glasses, faces are tiny from up here.",
    "Perfect seat, close enough to see every expression.",
    "The cast had wonderful chemistry tonight.",
]

SAMPLE_TAGS = [
    "rewatch",
    "first_time",
    "great_cast",
    "live_band",
    "strings",
    "piano",
    "three_person_cast",
    "based_on_true_story",
    "tearjerker",
    "10th_anniversary",
    "good_view",
    "blocked_view",
    "opera_glass_needed",
]

SAMPLE_IMAGES = [
    "https://images.example.com/stage/curtain-call.jpg",
    "https://images.example.com/stage/set-deck.jpg",
    "https://images.example.com/stage/poster.jpg",
    "https://images.example.com/stage/lobby.jpg",
    "https://images.example.com/stage/ticket.jpg",
]


class Command(BaseCommand):
    help = 'Generate random reviews for a musical'

    def add_arguments(self, parser):
        parser.add_argument('--musical', required=True, help='UUID of the musical to review')
        parser.add_argument('--count', type=int, default=100, help='Number of reviews to create')
        parser.add_argument('--members', type=int, default=16, help='Number of members to draw authors from')
        parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducible data')

    @transaction.atomic
    def handle(self, *args, **options):
        rng = random.Random(options['seed'])

        try:
            musical = get_musical(musical_id=options['musical'])
        except MusicalNotFoundError as e:
            raise CommandError(str(e))

        members = list(User.objects.filter(is_active=True).order_by('created_at')[:options['members']])
        if not members:
            raise CommandError('No active members to write reviews')

        seats = list(TheaterSeat.objects.filter(theater_id=musical.theater_id))
        if not seats:
            raise CommandError(f'Theater "{musical.theater}" has no seats')

        self.stdout.write(f'Creating {options["count"]} reviews for "{musical.title}"...')

        for _ in range(options['count']):
            tags = rng.sample(SAMPLE_TAGS, rng.randint(0, 5))
            payload = {
                'grade': rng.choice(GradeType.values),
                'gap_score': rng.choice(ScoreChoice.values),
                'sight_score': rng.choice(ScoreChoice.values),
                'sound_score': rng.choice(ScoreChoice.values),
                'light_score': rng.choice(ScoreChoice.values),
                'content': rng.choice(SAMPLE_CONTENT),
                'opera_glass': rng.random() < 0.5,
                'block': rng.random() < 0.5,
                'img_urls': [rng.choice(SAMPLE_IMAGES)],
                'tags': ', '.join(tags),
            }

            build_review(
                author=rng.choice(members),
                seat=rng.choice(seats),
                musical=musical,
                payload=payload,
            )

        self.stdout.write(self.style.SUCCESS(f'Created {options["count"]} reviews.'))
