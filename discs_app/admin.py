from django.contrib import admin

from discs_app.models import LaserDisc, OperationalIssue


@admin.register(LaserDisc)
class LaserDiscAdmin(admin.ModelAdmin):
    list_display = ["title", "year", "format", "upc", "watched", "added_date"]
    list_filter = ["watched", "format"]
    search_fields = ["title", "director", "genre", "upc"]
    readonly_fields = ["added_date", "updated_date"]
    ordering = ["title"]
    actions = ["mark_unwatched"]

    @admin.action(description="Mark selected LaserDiscs as unwatched")
    def mark_unwatched(self, request, queryset):
        count = queryset.update(watched=False)
        self.message_user(request, f"Marked {count} LaserDisc(s) as unwatched.")


@admin.register(OperationalIssue)
class OperationalIssueAdmin(admin.ModelAdmin):
    list_display = ["name", "task", "severity", "created_at"]
    list_filter = ["severity", "task"]
    search_fields = ["name", "error_message"]
    readonly_fields = ["created_at"]
