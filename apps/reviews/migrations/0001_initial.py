# Generated manually for reviews app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


SCORE_CHOICES = [('great', 'Great'), ('good', 'Good'), ('normal', 'Normal'), ('bad', 'Bad')]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('musicals', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Tag',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'tags',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Review',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('grade', models.CharField(choices=[('VIP', 'VIP'), ('R', 'R'), ('S', 'S'), ('A', 'A'), ('B', 'B')], max_length=10)),
                ('gap_score', models.CharField(choices=SCORE_CHOICES, max_length=10)),
                ('sight_score', models.CharField(choices=SCORE_CHOICES, max_length=10)),
                ('sound_score', models.CharField(choices=SCORE_CHOICES, max_length=10)),
                ('light_score', models.CharField(choices=SCORE_CHOICES, max_length=10)),
                ('content', models.TextField(blank=True)),
                ('opera_glass', models.BooleanField(default=False)),
                ('block', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('author', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to=settings.AUTH_USER_MODEL)),
                ('musical', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to='musicals.musical')),
                ('theater_seat', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='reviews', to='musicals.theaterseat')),
            ],
            options={
                'db_table': 'reviews',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['musical', 'created_at'], name='reviews_musical_created_idx'),
                    models.Index(fields=['author', 'created_at'], name='reviews_author_created_idx'),
                    models.Index(fields=['created_at'], name='reviews_created_at_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ReviewFile',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('file_path', models.CharField(max_length=1000)),
                ('position', models.PositiveIntegerField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('review', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='files', to='reviews.review')),
            ],
            options={
                'db_table': 'review_files',
                'ordering': ['position'],
            },
        ),
        migrations.CreateModel(
            name='ReviewTag',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('review', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tag_links', to='reviews.review')),
                ('tag', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='review_links', to='reviews.tag')),
            ],
            options={
                'db_table': 'review_tags',
                'unique_together': {('review', 'tag')},
            },
        ),
        migrations.CreateModel(
            name='ReviewHeart',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('member', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='review_hearts', to=settings.AUTH_USER_MODEL)),
                ('review', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='hearts', to='reviews.review')),
            ],
            options={
                'db_table': 'review_hearts',
                'unique_together': {('review', 'member')},
                'indexes': [
                    models.Index(fields=['member', 'review'], name='review_hearts_member_idx'),
                ],
            },
        ),
    ]
