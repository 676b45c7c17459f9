import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


def _timestamps():
    return [
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


def _pk():
    return (
        "id",
        models.BigAutoField(
            auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
        ),
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Enrollment",
            fields=[
                _pk(),
                ("name", models.CharField(max_length=255)),
                *_timestamps(),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollment",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
        ),
        migrations.CreateModel(
            name="Address",
            fields=[
                _pk(),
                ("street", models.CharField(max_length=255)),
                ("number", models.CharField(max_length=32)),
                ("neighborhood", models.CharField(max_length=255)),
                ("city", models.CharField(max_length=255)),
                ("state", models.CharField(max_length=64)),
                ("postal_code", models.CharField(max_length=16)),
                ("detail", models.CharField(blank=True, max_length=255)),
                (
                    "enrollment",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="address",
                        to="conference.enrollment",
                    ),
                ),
            ],
        ),
        migrations.CreateModel(
            name="TicketType",
            fields=[
                _pk(),
                ("name", models.CharField(max_length=100)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("is_remote", models.BooleanField(default=False)),
                ("includes_hotel", models.BooleanField(default=False)),
                *_timestamps(),
            ],
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=[
                _pk(),
                (
                    "status",
                    models.CharField(
                        choices=[("RESERVED", "Reserved"), ("PAID", "Paid")],
                        default="RESERVED",
                        max_length=16,
                    ),
                ),
                *_timestamps(),
                (
                    "enrollment",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tickets",
                        to="conference.enrollment",
                    ),
                ),
                (
                    "ticket_type",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tickets",
                        to="conference.tickettype",
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(
                        fields=["enrollment", "-created_at"],
                        name="ticket_enrollment_recent_idx",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Hotel",
            fields=[
                _pk(),
                ("name", models.CharField(max_length=255)),
                ("image", models.URLField(blank=True, max_length=500)),
                *_timestamps(),
            ],
            options={"ordering": ["id"]},
        ),
        migrations.CreateModel(
            name="Room",
            fields=[
                _pk(),
                ("name", models.CharField(max_length=100)),
                ("capacity", models.PositiveIntegerField()),
                *_timestamps(),
                (
                    "hotel",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="rooms",
                        to="conference.hotel",
                    ),
                ),
            ],
            options={"ordering": ["id"]},
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                _pk(),
                *_timestamps(),
                (
                    "room",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bookings",
                        to="conference.room",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bookings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={"ordering": ["id"]},
        ),
        migrations.CreateModel(
            name="Place",
            fields=[
                _pk(),
                ("name", models.CharField(max_length=255)),
            ],
        ),
        migrations.CreateModel(
            name="Activity",
            fields=[
                _pk(),
                ("name", models.CharField(max_length=255)),
                ("day", models.DateField()),
                ("starts_at", models.TimeField()),
                ("ends_at", models.TimeField()),
                *_timestamps(),
                (
                    "place",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="activities",
                        to="conference.place",
                    ),
                ),
            ],
            options={
                "ordering": ["day", "starts_at", "id"],
                "verbose_name_plural": "activities",
            },
        ),
        migrations.CreateModel(
            name="UserActivity",
            fields=[
                _pk(),
                *_timestamps(),
                (
                    "activity",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="registrations",
                        to="conference.activity",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="user_activities",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "user activities",
                "constraints": [
                    models.UniqueConstraint(
                        fields=("user",), name="one_activity_registration_per_user"
                    )
                ],
            },
        ),
    ]
