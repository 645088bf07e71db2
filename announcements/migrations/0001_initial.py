import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Announcement",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("apps", models.JSONField(blank=True, default=list, help_text="List of app slugs, e.g. ['eatery','transit']")),
                ("body", models.TextField()),
                ("end_date", models.DateTimeField(db_index=True)),
                ("image_url", models.URLField(blank=True, default="", max_length=1000)),
                ("is_debug", models.BooleanField(db_index=True, default=False)),
                ("link", models.URLField(blank=True, default="", max_length=1000)),
                ("start_date", models.DateTimeField(db_index=True)),
                ("title", models.CharField(max_length=200)),
                (
                    "creator",
                    models.ForeignKey(
                        blank=True,
                        help_text="User who created this announcement.",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="announcements",
                        to="users.user",
                    ),
                ),
            ],
            options={
                "ordering": ["-start_date", "id"],
            },
        ),
    ]
