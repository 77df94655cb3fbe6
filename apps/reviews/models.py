# ==========================================
# apps/reviews/models.py
# ==========================================

from django.db import models
import uuid
from apps.musicals.models import GradeType


class ScoreChoice(models.TextChoices):
    GREAT = 'great', 'Great'
    GOOD = 'good', 'Good'
    NORMAL = 'normal', 'Normal'
    BAD = 'bad', 'Bad'


class Tag(models.Model):
    """Free-text review tags, created on first use."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'tags'
        ordering = ['name']

    def __str__(self):
        return self.name


class Review(models.Model):
    """Member review of a musical, written from one seat."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    musical = models.ForeignKey('musicals.Musical', on_delete=models.CASCADE, related_name='reviews')
    theater_seat = models.ForeignKey('musicals.TheaterSeat', on_delete=models.PROTECT, related_name='reviews')
    author = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    grade = models.CharField(max_length=10, choices=GradeType.choices)
    gap_score = models.CharField(max_length=10, choices=ScoreChoice.choices)
    sight_score = models.CharField(max_length=10, choices=ScoreChoice.choices)
    sound_score = models.CharField(max_length=10, choices=ScoreChoice.choices)
    light_score = models.CharField(max_length=10, choices=ScoreChoice.choices)
    content = models.TextField(blank=True)
    opera_glass = models.BooleanField(default=False)
    block = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        indexes = [
            models.Index(fields=['musical', 'created_at'], name='reviews_musical_created_idx'),
            models.Index(fields=['author', 'created_at'], name='reviews_author_created_idx'),
            models.Index(fields=['created_at'], name='reviews_created_at_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.author.get_display_name()} - {self.musical.title} ({self.grade})"


class ReviewFile(models.Model):
    """Image attached to a review. Position keeps upload order."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='files')
    file_path = models.CharField(max_length=1000)
    position = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'review_files'
        ordering = ['position']

    def __str__(self):
        return self.file_path


class ReviewTag(models.Model):
    """Link between a review and a tag."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='tag_links')
    tag = models.ForeignKey(Tag, on_delete=models.PROTECT, related_name='review_links')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'review_tags'
        unique_together = [['review', 'tag']]

    def __str__(self):
        return f"{self.review_id} #{self.tag.name}"


class ReviewHeart(models.Model):
    """A member's heart (like) on a review."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='hearts')
    member = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='review_hearts')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'review_hearts'
        unique_together = [['review', 'member']]
        indexes = [
            models.Index(fields=['member', 'review'], name='review_hearts_member_idx'),
        ]

    def __str__(self):
        return f"{self.member} ♥ {self.review_id}"
