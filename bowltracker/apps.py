from django.apps import AppConfig

from bowltracker import conf


class BowlTrackerConfig(AppConfig):
    name = 'bowltracker'
    verbose_name = 'Bowling score tracker'

    def ready(self):
        """Connects the logging receivers unless disabled in the settings."""
        if not conf.get_setting('BOWLTRACKER_LOG_SCORES'):
            return
        from bowltracker import receivers
        from bowltracker import signals

        signals.score_updated.connect(
            receivers.log_score_updated, dispatch_uid='bowltracker.log_score')
        signals.end_of_game.connect(
            receivers.log_end_of_game,
            dispatch_uid='bowltracker.log_end_of_game')
        signals.perfect_game.connect(
            receivers.log_perfect_game,
            dispatch_uid='bowltracker.log_perfect_game')
