"""
CollectionService: storage for the LaserDiscs the collector owns.
"""

from __future__ import annotations

import logging
import random

from django.db.models import Q

from discs_app.models import LaserDisc

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "title",
    "year",
    "director",
    "genre",
    "format",
    "sides",
    "runtime",
    "cover_image_url",
    "lddb_url",
    "watched",
    "notes",
)
CREATE_FIELDS = ("upc",) + tuple(f for f in EDITABLE_FIELDS if f != "watched")


class LaserDiscAlreadyExistsError(Exception):
    """Raised when adding a disc whose UPC is already in the collection."""

    pass


class CollectionService:
    def list_all(self) -> list[LaserDisc]:
        return list(LaserDisc.objects.order_by("title"))

    def get_by_id(self, laserdisc_id: int) -> LaserDisc:
        """
        Raises:
            LaserDisc.DoesNotExist: If no disc has this id.
        """
        return LaserDisc.objects.get(pk=laserdisc_id)

    def get_by_upc(self, upc: str) -> LaserDisc | None:
        return LaserDisc.objects.filter(upc=upc).first()

    def create(self, data: dict) -> LaserDisc:
        """
        Add a disc to the collection. Keys other than the model's editable fields are ignored.

        Raises:
            LaserDiscAlreadyExistsError: If a disc with the same UPC exists.
        """
        upc = data["upc"]
        if LaserDisc.objects.filter(upc=upc).exists():
            raise LaserDiscAlreadyExistsError(f"LaserDisc with UPC {upc} already exists")

        laserdisc = LaserDisc.objects.create(**{k: v for k, v in data.items() if k in CREATE_FIELDS})
        logger.info(f"Added to collection: {laserdisc}")
        return laserdisc

    def update(self, laserdisc_id: int, changes: dict) -> LaserDisc:
        """
        Apply the fields present in changes; everything else is left alone.

        Raises:
            LaserDisc.DoesNotExist: If no disc has this id.
        """
        laserdisc = self.get_by_id(laserdisc_id)

        update_fields = []
        for field in EDITABLE_FIELDS:
            if field in changes:
                setattr(laserdisc, field, changes[field])
                update_fields.append(field)

        if update_fields:
            laserdisc.save(update_fields=update_fields + ["updated_date"])

        return laserdisc

    def delete(self, laserdisc_id: int) -> None:
        """
        Raises:
            LaserDisc.DoesNotExist: If no disc has this id.
        """
        deleted, _ = LaserDisc.objects.filter(pk=laserdisc_id).delete()
        if not deleted:
            raise LaserDisc.DoesNotExist(f"LaserDisc {laserdisc_id} does not exist")

    def toggle_watched(self, laserdisc_id: int) -> LaserDisc:
        laserdisc = self.get_by_id(laserdisc_id)
        laserdisc.watched = not laserdisc.watched
        laserdisc.save(update_fields=["watched", "updated_date"])
        return laserdisc

    def random_unwatched(self) -> LaserDisc | None:
        unwatched = list(LaserDisc.objects.filter(watched=False))
        if not unwatched:
            return None
        return random.choice(unwatched)

    def search(self, query: str) -> list[LaserDisc]:
        """Case-insensitive substring search over title, director and genre."""
        return list(
            LaserDisc.objects.filter(
                Q(title__icontains=query) | Q(director__icontains=query) | Q(genre__icontains=query)
            ).order_by("title")
        )

    def stats(self) -> dict[str, int]:
        total = LaserDisc.objects.count()
        watched = LaserDisc.objects.filter(watched=True).count()
        return {
            "total": total,
            "watched": watched,
            "unwatched": total - watched,
        }
