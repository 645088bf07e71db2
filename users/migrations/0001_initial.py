from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("email", models.EmailField(help_text="Google account email; unique.", max_length=254, unique=True)),
                ("image_url", models.URLField(blank=True, default="", help_text="Profile picture URL.", max_length=1000)),
                ("is_admin", models.BooleanField(default=False)),
                ("name", models.CharField(blank=True, default="", max_length=200)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
