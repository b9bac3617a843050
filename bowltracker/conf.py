"""Settings of the bowltracker app, with their defaults."""
from django.conf import settings


DEFAULTS = {
    # Log score updates, the end of the game and perfect games.
    'BOWLTRACKER_LOG_SCORES': True,
}


def get_setting(name):
    """Returns the project's value of the setting, or its default."""
    return getattr(settings, name, DEFAULTS[name])
