"""
Initial migration for the camps app.

Creates the Camp table with its organizer foreign key, the
participant counter and a check constraint keeping fees non-negative.
"""
from django.db import migrations, models
import django.db.models.deletion
from django.conf import settings


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Camp",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("image", models.URLField(blank=True, max_length=500)),
                ("fees", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ("date_time", models.DateTimeField(blank=True, null=True)),
                ("location", models.CharField(blank=True, max_length=255)),
                ("healthcare_professional", models.CharField(blank=True, max_length=255)),
                ("target_audience", models.CharField(blank=True, max_length=255)),
                ("description", models.TextField(blank=True)),
                ("specialized_services", models.JSONField(blank=True, default=list)),
                ("participant_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "organizer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="organized_camps",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["organizer"], name="camps_camp_organizer_idx")],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(fees__gte=0), name="camp_fees_non_negative"),
                ],
            },
        ),
    ]
