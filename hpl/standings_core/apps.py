from django.apps import AppConfig


class StandingsCoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hpl.standings_core'
    verbose_name = 'Standings Core Logic'
