from django.contrib import admin
from django.db.models import Count
from .models import Review, ReviewFile, ReviewHeart, ReviewTag, Tag


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    """Admin interface for Tags."""

    list_display = ['name', 'usage_count', 'created_at']
    list_filter = ['created_at']
    search_fields = ['name']
    ordering = ['name']

    def usage_count(self, obj):
        """Show how many reviews use the tag."""
        return obj.link_count
    usage_count.short_description = 'Times Used'
    usage_count.admin_order_field = 'link_count'

    def get_queryset(self, request):
        """Optimize query with annotation."""
        qs = super().get_queryset(request)
        return qs.annotate(link_count=Count('review_links'))


class ReviewFileInline(admin.TabularInline):
    model = ReviewFile
    extra = 0
    fields = ['position', 'file_path', 'created_at']
    readonly_fields = ['created_at']


class ReviewTagInline(admin.TabularInline):
    model = ReviewTag
    extra = 0
    autocomplete_fields = ['tag']
    readonly_fields = ['created_at']


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews."""

    list_display = [
        'musical',
        'author',
        'grade',
        'get_seat',
        'heart_count',
        'created_at'
    ]
    list_filter = [
        'grade',
        'opera_glass',
        'block',
        'created_at',
    ]
    search_fields = [
        'musical__title',
        'author__email',
        'author__nickname',
        'content'
    ]
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    inlines = [ReviewFileInline, ReviewTagInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('musical', 'theater_seat', 'author', 'grade')
        }),
        ('Scores', {
            'fields': (
                'gap_score',
                'sight_score',
                'sound_score',
                'light_score',
            ),
            'classes': ('collapse',)
        }),
        ('Review Content', {
            'fields': ('content', 'opera_glass', 'block')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_seat(self, obj):
        seat = obj.theater_seat
        return f"{seat.get_floor_display()} {seat.section}-{seat.seat_row}-{seat.seat}"
    get_seat.short_description = 'Seat'

    def heart_count(self, obj):
        return obj.num_hearts
    heart_count.short_description = 'Hearts'
    heart_count.admin_order_field = 'num_hearts'

    def get_queryset(self, request):
        """Optimize query with select_related."""
        qs = super().get_queryset(request)
        return qs.select_related('author', 'musical', 'theater_seat').annotate(num_hearts=Count('hearts'))


@admin.register(ReviewHeart)
class ReviewHeartAdmin(admin.ModelAdmin):
    """Admin interface for review hearts."""

    list_display = ['member', 'review', 'created_at']
    search_fields = ['member__email', 'review__musical__title']
    readonly_fields = ['created_at']
    ordering = ['-created_at']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('member', 'review__musical')
