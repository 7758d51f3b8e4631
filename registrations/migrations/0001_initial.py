"""
Initial migration for the registrations app.

Creates the Registration table with one row per (camp, user) and at
most one registration per settled payment intent.
"""
from django.db import migrations, models
import django.db.models.deletion
from django.conf import settings


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("camps", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Registration",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("camp_name", models.CharField(max_length=255)),
                ("user_email", models.EmailField(max_length=254)),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(max_length=32)),
                ("age", models.PositiveIntegerField()),
                ("gender", models.CharField(max_length=32)),
                ("emergency_contact", models.CharField(max_length=255)),
                ("medical_history", models.TextField(blank=True, default="")),
                ("payment_method", models.CharField(choices=[("cash", "Cash"), ("card", "Card")], max_length=8)),
                ("status", models.CharField(choices=[("confirmed", "Confirmed")], default="confirmed", max_length=16)),
                ("payment_status", models.CharField(choices=[("pending", "Pending"), ("paid", "Paid")], max_length=8)),
                (
                    "payment_intent_id",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Verified Stripe PaymentIntent identifier (card payments only)",
                        max_length=255,
                    ),
                ),
                (
                    "amount_paid",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        help_text="Amount settled by the processor, in major units",
                        max_digits=10,
                        null=True,
                    ),
                ),
                ("registered_at", models.DateTimeField(auto_now_add=True)),
                (
                    "camp",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="registrations",
                        to="camps.camp",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="camp_registrations",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-registered_at"],
                "indexes": [models.Index(fields=["user_email"], name="reg_user_email_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("camp", "user"), name="uniq_registration_per_camp_user"),
                    models.UniqueConstraint(
                        condition=~models.Q(payment_intent_id=""),
                        fields=("payment_intent_id",),
                        name="uniq_registration_payment_intent",
                    ),
                ],
            },
        ),
    ]
