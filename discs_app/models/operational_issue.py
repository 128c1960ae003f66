import traceback

from django.db import models


class OperationalIssue(models.Model):
    """Tracks lddb.com fetch failures and other problems seen during lookups."""

    class Severity(models.TextChoices):
        ERROR = "error", "Error"
        WARNING = "warning", "Warning"
        INFO = "info", "Info"

    name = models.CharField(max_length=255)
    task = models.CharField(max_length=255)
    error_message = models.TextField()
    traceback = models.TextField(blank=True)
    context = models.JSONField(default=dict, blank=True)
    severity = models.CharField(
        max_length=20,
        choices=Severity.choices,
        default=Severity.ERROR,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["created_at"], name="opissue_created_at_idx"),
            models.Index(fields=["severity"], name="opissue_severity_idx"),
        ]
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.name} ({self.task}) - {self.created_at}"

    @classmethod
    def record(
        cls,
        name: str,
        task: str,
        error: Exception | str,
        context: dict,
        severity: "OperationalIssue.Severity",
    ) -> "OperationalIssue":
        """
        Store an issue. When error is an exception, its traceback is kept too.
        """
        formatted_traceback = ""
        if isinstance(error, Exception):
            formatted_traceback = "".join(traceback.format_exception(error))

        return cls.objects.create(
            name=name,
            task=task,
            error_message=str(error),
            traceback=formatted_traceback,
            context=context,
            severity=severity,
        )
