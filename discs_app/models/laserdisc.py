"""
LaserDisc model for the personal collection.
"""

from django.db import models


class LaserDisc(models.Model):
    """
    A LaserDisc owned by the collector.
    """

    upc = models.CharField(
        max_length=32,
        unique=True,
        help_text="UPC printed on the jacket",
    )
    title = models.CharField(
        max_length=300,
    )
    year = models.PositiveIntegerField(
        default=0,
        help_text="Release year (0 when unknown)",
    )
    director = models.CharField(
        max_length=200,
        blank=True,
        default="",
    )
    genre = models.CharField(
        max_length=100,
        blank=True,
        default="",
    )
    format = models.CharField(
        max_length=50,
        blank=True,
        default="",
        help_text="Disc format, e.g. 'CLV', 'CAV', 'CLV/CAV'",
    )
    sides = models.PositiveIntegerField(
        default=0,
        help_text="Number of sides (0 when unknown)",
    )
    runtime = models.PositiveIntegerField(
        default=0,
        help_text="Runtime in minutes (0 when unknown)",
    )
    cover_image_url = models.URLField(
        max_length=500,
        blank=True,
        default="",
    )
    lddb_url = models.URLField(
        max_length=500,
        blank=True,
        default="",
        help_text="URL of the disc on lddb.com",
    )
    watched = models.BooleanField(default=False)
    notes = models.TextField(blank=True, default="")
    added_date = models.DateTimeField(auto_now_add=True)
    updated_date = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["title"]
        indexes = [
            models.Index(fields=["title"], name="laserdisc_title_idx"),
            models.Index(fields=["watched"], name="laserdisc_watched_idx"),
        ]

    def __str__(self) -> str:
        if self.year:
            return f"{self.title} ({self.year})"
        return self.title

    def to_dict(self) -> dict:
        return {
            "id": self.pk,
            "upc": self.upc,
            "title": self.title,
            "year": self.year,
            "director": self.director,
            "genre": self.genre,
            "format": self.format,
            "sides": self.sides,
            "runtime": self.runtime,
            "cover_image_url": self.cover_image_url,
            "lddb_url": self.lddb_url,
            "watched": self.watched,
            "notes": self.notes,
            "added_date": self.added_date.isoformat() if self.added_date else None,
            "updated_date": self.updated_date.isoformat() if self.updated_date else None,
        }
