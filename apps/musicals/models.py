# ==========================================
# apps/musicals/models.py
# ==========================================

from django.db import models
import uuid


class FloorType(models.TextChoices):
    FIRST = 'first', '1st Floor'
    SECOND = 'second', '2nd Floor'
    THIRD = 'third', '3rd Floor'


class GradeType(models.TextChoices):
    VIP = 'VIP', 'VIP'
    R = 'R', 'R'
    S = 'S', 'S'
    A = 'A', 'A'
    B = 'B', 'B'


class Theater(models.Model):
    """Venue where musicals are staged."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, unique=True)
    address = models.CharField(max_length=300, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'theaters'
        ordering = ['name']

    def __str__(self):
        return self.name


class TheaterSeat(models.Model):
    """A physical seat, addressed by floor, section, row and number."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    theater = models.ForeignKey(Theater, on_delete=models.CASCADE, related_name='seats')
    floor = models.CharField(max_length=20, choices=FloorType.choices, default=FloorType.FIRST)
    section = models.CharField(max_length=20)
    seat_row = models.CharField(max_length=20)
    seat = models.PositiveIntegerField()

    class Meta:
        db_table = 'theater_seats'
        unique_together = [['theater', 'floor', 'section', 'seat_row', 'seat']]
        ordering = ['floor', 'section', 'seat_row', 'seat']

    def __str__(self):
        return f"{self.theater.name} {self.get_floor_display()} {self.section}-{self.seat_row}-{self.seat}"


class Musical(models.Model):
    """A musical production running at one theater."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200, db_index=True)
    poster_url = models.URLField(max_length=500, blank=True)
    theater = models.ForeignKey(Theater, on_delete=models.PROTECT, related_name='musicals')
    open_date = models.DateField(null=True, blank=True)
    close_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'musicals'
        ordering = ['-open_date', 'title']

    def __str__(self):
        return self.title
