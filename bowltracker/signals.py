"""Notifications sent while a game is being scored.

All signals are dispatched synchronously, so every receiver has run by the
time the throw that triggered it has been recorded.

frame_complete: sent by a Frame once its own pins are known.
    Arguments: frame_number, total_pins
all_frames_done: sent by the last Frame after its final throw.
score_updated: sent by a Game for every frame whose cumulative score was
    (re)calculated. Arguments: frame_number, score
end_of_game: sent by a Game once the last frame has been scored.
    Arguments: score
perfect_game: sent by a Game after end_of_game for a score of 300.
    Arguments: score
"""
from django.dispatch import Signal


frame_complete = Signal()
all_frames_done = Signal()

score_updated = Signal()
end_of_game = Signal()
perfect_game = Signal()
