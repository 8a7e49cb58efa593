import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("venue", models.CharField(max_length=255)),
                ("category", models.CharField(max_length=100)),
                ("starts_at", models.DateTimeField()),
                ("booking_deadline", models.DateTimeField(blank=True, null=True)),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["starts_at"],
                "indexes": [
                    models.Index(fields=["starts_at"], name="event_starts_at_idx"),
                    models.Index(fields=["category"], name="event_category_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="TicketCategory",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("limit", models.PositiveIntegerField()),
                ("sold", models.PositiveIntegerField(default=0)),
                ("position", models.PositiveSmallIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ticket_categories",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "ticket categories",
                "ordering": ["position", "created_at"],
                "indexes": [models.Index(fields=["event"], name="ticket_category_event_idx")],
            },
        ),
    ]
