from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="App",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(help_text="Display name, e.g. Eatery.", max_length=120)),
                ("slug", models.SlugField(help_text="Stable identifier referenced by announcements.", max_length=80, unique=True)),
            ],
            options={
                "verbose_name": "app",
                "ordering": ["slug"],
            },
        ),
    ]
