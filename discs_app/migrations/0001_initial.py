from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LaserDisc",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("upc", models.CharField(help_text="UPC printed on the jacket", max_length=32, unique=True)),
                ("title", models.CharField(max_length=300)),
                ("year", models.PositiveIntegerField(default=0, help_text="Release year (0 when unknown)")),
                ("director", models.CharField(blank=True, default="", max_length=200)),
                ("genre", models.CharField(blank=True, default="", max_length=100)),
                (
                    "format",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Disc format, e.g. 'CLV', 'CAV', 'CLV/CAV'",
                        max_length=50,
                    ),
                ),
                ("sides", models.PositiveIntegerField(default=0, help_text="Number of sides (0 when unknown)")),
                ("runtime", models.PositiveIntegerField(default=0, help_text="Runtime in minutes (0 when unknown)")),
                ("cover_image_url", models.URLField(blank=True, default="", max_length=500)),
                (
                    "lddb_url",
                    models.URLField(blank=True, default="", help_text="URL of the disc on lddb.com", max_length=500),
                ),
                ("watched", models.BooleanField(default=False)),
                ("notes", models.TextField(blank=True, default="")),
                ("added_date", models.DateTimeField(auto_now_add=True)),
                ("updated_date", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["title"],
                "indexes": [
                    models.Index(fields=["title"], name="laserdisc_title_idx"),
                    models.Index(fields=["watched"], name="laserdisc_watched_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="OperationalIssue",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("task", models.CharField(max_length=255)),
                ("error_message", models.TextField()),
                ("traceback", models.TextField(blank=True)),
                ("context", models.JSONField(blank=True, default=dict)),
                (
                    "severity",
                    models.CharField(
                        choices=[("error", "Error"), ("warning", "Warning"), ("info", "Info")],
                        default="error",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["created_at"], name="opissue_created_at_idx"),
                    models.Index(fields=["severity"], name="opissue_severity_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="APICallCounter",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("service_name", models.CharField(help_text="Name of the external service (e.g., 'lddb')", max_length=100)),
                ("date", models.DateField()),
                ("call_count", models.PositiveIntegerField(default=0)),
                ("last_called_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "verbose_name": "API Call Counter",
                "verbose_name_plural": "API Call Counters",
                "constraints": [
                    models.UniqueConstraint(fields=("service_name", "date"), name="unique_service_date"),
                ],
            },
        ),
    ]
