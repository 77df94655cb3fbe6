from rest_framework import serializers
from apps.musicals.models import FloorType, GradeType
from .models import ScoreChoice, Tag


class ReviewRequestSerializer(serializers.Serializer):
    """
    Payload for writing or editing a review.

    Seat fields (floor, section, row, seat) identify a seat in the musical's
    theater. ``tags`` is free text, comma separated.
    """

    grade = serializers.ChoiceField(choices=GradeType.choices)
    floor = serializers.ChoiceField(choices=FloorType.choices)
    section = serializers.CharField(max_length=20)
    row = serializers.CharField(max_length=20)
    seat = serializers.IntegerField(min_value=1)
    content = serializers.CharField(required=False, allow_blank=True, default='')
    img_urls = serializers.ListField(
        child=serializers.CharField(max_length=1000),
        required=False,
        default=list
    )
    gap_score = serializers.ChoiceField(choices=ScoreChoice.choices)
    sight_score = serializers.ChoiceField(choices=ScoreChoice.choices)
    sound_score = serializers.ChoiceField(choices=ScoreChoice.choices)
    light_score = serializers.ChoiceField(choices=ScoreChoice.choices)
    opera_glass = serializers.BooleanField(required=False, default=False)
    block = serializers.BooleanField(required=False, default=False)
    tags = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_tags(self, value):
        """Reject tag names that do not fit the tag column."""
        from .services.tag_management import split_tag_names

        max_length = Tag._meta.get_field('name').max_length
        for name in split_tag_names(value):
            if len(name) > max_length:
                raise serializers.ValidationError(
                    f'Tag names must be at most {max_length} characters'
                )
        return value
