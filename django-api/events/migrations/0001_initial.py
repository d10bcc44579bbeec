import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("location", models.CharField(blank=True, max_length=255)),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField()),
                ("organizer_id", models.CharField(db_index=True, max_length=64)),
                ("organizer_name", models.CharField(blank=True, max_length=255)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("DRAFT", "Draft"),
                            ("PUBLISHED", "Published"),
                            ("CANCELLED", "Cancelled"),
                            ("COMPLETED", "Completed"),
                        ],
                        default="DRAFT",
                        max_length=16,
                    ),
                ),
                ("category", models.CharField(blank=True, db_index=True, max_length=100)),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
                ("additional_info", models.JSONField(blank=True, default=dict)),
                ("speakers", models.JSONField(blank=True, default=list)),
                ("agenda", models.JSONField(blank=True, default=list)),
                ("ticket_types", models.JSONField(blank=True, default=list)),
                ("registrations", models.JSONField(blank=True, default=list)),
                ("version", models.PositiveIntegerField(default=1)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="events_even_created_4b9a3c_idx"),
                    models.Index(fields=["organizer_id", "status"], name="events_even_organiz_8e1f2d_idx"),
                    models.Index(fields=["status", "start_date"], name="events_even_status_7c2a9b_idx"),
                ],
            },
        ),
    ]
