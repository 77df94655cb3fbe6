# Generated manually for musicals app

import uuid
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Theater',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200, unique=True)),
                ('address', models.CharField(blank=True, max_length=300)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'theaters',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Musical',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(db_index=True, max_length=200)),
                ('poster_url', models.URLField(blank=True, max_length=500)),
                ('open_date', models.DateField(blank=True, null=True)),
                ('close_date', models.DateField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('theater', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='musicals', to='musicals.theater')),
            ],
            options={
                'db_table': 'musicals',
                'ordering': ['-open_date', 'title'],
            },
        ),
        migrations.CreateModel(
            name='TheaterSeat',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('floor', models.CharField(choices=[('first', '1st Floor'), ('second', '2nd Floor'), ('third', '3rd Floor')], default='first', max_length=20)),
                ('section', models.CharField(max_length=20)),
                ('seat_row', models.CharField(max_length=20)),
                ('seat', models.PositiveIntegerField()),
                ('theater', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='seats', to='musicals.theater')),
            ],
            options={
                'db_table': 'theater_seats',
                'ordering': ['floor', 'section', 'seat_row', 'seat'],
                'unique_together': {('theater', 'floor', 'section', 'seat_row', 'seat')},
            },
        ),
    ]
