"""Helpers shared by the unit tests."""
from unittest import mock

from bowltracker import signals


SIGNAL_NAMES = {
    signals.frame_complete: 'frame_complete',
    signals.all_frames_done: 'all_frames_done',
    signals.score_updated: 'score_updated',
    signals.end_of_game: 'end_of_game',
    signals.perfect_game: 'perfect_game',
}


class SignalLog(object):
    """Records, in order, the signals sent by a single sender."""

    def __init__(self, sender, *signal_list):
        self.sender = sender
        self.signal_list = signal_list or tuple(SIGNAL_NAMES)
        self.events = []
        self.receiver = mock.Mock(side_effect=self._record)
        for signal in self.signal_list:
            signal.connect(self.receiver, sender=sender, weak=False)

    def _record(self, signal, sender, **kwargs):
        self.events.append((SIGNAL_NAMES[signal], kwargs))

    def named(self, name):
        return [kwargs for event_name, kwargs in self.events
                if event_name == name]

    def scores(self):
        """Returns the (frame number, score) pairs of the score updates."""
        return [(kwargs['frame_number'], kwargs['score'])
                for kwargs in self.named('score_updated')]

    def clear(self):
        del self.events[:]

    def disconnect(self):
        for signal in self.signal_list:
            signal.disconnect(self.receiver, sender=self.sender)


def play(game, scoresheet):
    """Records the marks of a scoresheet such as 'X 7/ 72 -/ XXX'.

    Frames are separated by whitespace and numbered from 1.
    """
    for frame_number, marks in enumerate(scoresheet.split(), start=1):
        for mark in marks:
            game.record_mark(frame_number, mark)
