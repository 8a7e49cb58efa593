import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AuditEvent",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("user_id", models.BigIntegerField(db_index=True, null=True)),
                (
                    "action",
                    models.CharField(
                        choices=[
                            ("user-login", "user-login"),
                            ("create-booking", "create-booking"),
                            ("cancel-booking-user", "cancel-booking-user"),
                            ("cancel-booking-admin", "cancel-booking-admin"),
                        ],
                        max_length=40,
                    ),
                ),
                ("timestamp", models.DateTimeField(auto_now_add=True)),
                ("details", models.JSONField(blank=True, default=dict)),
            ],
            options={
                "ordering": ["-timestamp"],
                "indexes": [
                    models.Index(fields=["-timestamp"], name="audit_timestamp_idx"),
                    models.Index(fields=["action"], name="audit_action_idx"),
                ],
            },
        ),
    ]
