from django.apps import AppConfig


class DiscsAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "discs_app"
