"""
Per-day counter of requests made to lddb.com.
"""

import datetime

from django.db import models
from django.db.models import F, Sum
from django.utils import timezone


class APICallCounter(models.Model):
    """
    Number of requests made to an external site on a given day.

    lddb.com is a community site without an API; the counter keeps an eye on
    how hard lookups are hitting it.
    """

    service_name = models.CharField(
        max_length=100,
        help_text="Name of the external service (e.g., 'lddb')",
    )
    date = models.DateField()
    call_count = models.PositiveIntegerField(default=0)
    last_called_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        verbose_name = "API Call Counter"
        verbose_name_plural = "API Call Counters"
        constraints = [
            models.UniqueConstraint(
                fields=["service_name", "date"],
                name="unique_service_date",
            )
        ]

    def __str__(self):
        return f"{self.service_name} ({self.date}): {self.call_count} calls"

    @classmethod
    def increment(cls, service_name: str) -> int:
        """
        Count one more request for today and return the new total.

        The update is done with an F() expression so concurrent lookups do not
        lose counts.
        """
        today = timezone.now().date()

        counter, _ = cls.objects.get_or_create(
            service_name=service_name,
            date=today,
            defaults={"call_count": 0},
        )

        cls.objects.filter(pk=counter.pk).update(
            call_count=F("call_count") + 1,
            last_called_at=timezone.now(),
        )

        counter.refresh_from_db()
        return counter.call_count

    @classmethod
    def get_total_calls(
        cls,
        service_name: str,
        start_date: datetime.date | None,
        end_date: datetime.date | None,
    ) -> int:
        queryset = cls.objects.filter(service_name=service_name)

        if start_date:
            queryset = queryset.filter(date__gte=start_date)
        if end_date:
            queryset = queryset.filter(date__lte=end_date)

        result = queryset.aggregate(total=Sum("call_count"))
        return result["total"] or 0
