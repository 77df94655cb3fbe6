from django.contrib import admin
from .models import Musical, Theater, TheaterSeat


class TheaterSeatInline(admin.TabularInline):
    model = TheaterSeat
    extra = 0
    fields = ['floor', 'section', 'seat_row', 'seat']


@admin.register(Theater)
class TheaterAdmin(admin.ModelAdmin):
    """Admin interface for Theaters."""

    list_display = ['name', 'address', 'seat_count', 'created_at']
    search_fields = ['name', 'address']
    ordering = ['name']
    inlines = [TheaterSeatInline]

    def seat_count(self, obj):
        return obj.seats.count()
    seat_count.short_description = 'Seats'


@admin.register(Musical)
class MusicalAdmin(admin.ModelAdmin):
    """Admin interface for Musicals."""

    list_display = ['title', 'theater', 'open_date', 'close_date']
    list_filter = ['theater', 'open_date']
    search_fields = ['title', 'theater__name']
    date_hierarchy = 'open_date'
    ordering = ['-open_date']
