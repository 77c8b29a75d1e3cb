from django.apps import AppConfig


class PastriesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.pastries"
    label = "pastries"
