"""Module that encapsulates the ten frames of a bowling game."""
import logging

from bowltracker import constants
from bowltracker import exceptions
from bowltracker import frames
from bowltracker import serializers
from bowltracker import signals


class Game(object):
    """
    An instance of this class scores a game of ten frames as it is played.

    Every time a frame is complete, the cumulative scores of all the frames
    before it are calculated again, because the bonus of a strike or a spare
    is only known once the following throws have been recorded. Each
    recalculated score is sent with `signals.score_updated`. When the last
    frame is complete, its score is sent as well, followed by
    `signals.end_of_game` and, for a score of 300, `signals.perfect_game`.

    Attributes:
        frames: the ten frames in order
        carried_score: cumulative score of the frames preceding the frame that
            was completed last
        is_complete: True once the last frame has been scored
    """

    def __init__(self):
        self.frames = []
        self.carried_score = 0
        self.is_complete = False
        for number in range(constants.FIRST_FRAME_NUMBER,
                            constants.LAST_FRAME_NUMBER + 1):
            frame = frames.Frame(number)
            signals.frame_complete.connect(self._on_frame_complete,
                                           sender=frame)
            self.frames.append(frame)
        signals.all_frames_done.connect(
            self._on_all_frames_done,
            sender=self.get_frame(constants.LAST_FRAME_NUMBER))

    def __iter__(self):
        return iter(self.frames)

    def __len__(self):
        return len(self.frames)

    @property
    def score(self):
        """
        Returns the final score once the game is complete.

        While the game is in progress, this is `carried_score`: the cumulative
        score of the frames preceding the frame completed last. The frame
        completed last is left out because its bonus may still be pending, so
        after an open first frame the score still reads 0.
        """
        if self.is_complete:
            return self.get_frame(constants.LAST_FRAME_NUMBER).frame_score
        return self.carried_score

    def get_frame(self, frame_number):
        """Returns the frame by its number (1 to 10), or None if not found."""
        if (constants.FIRST_FRAME_NUMBER <= frame_number <=
                constants.LAST_FRAME_NUMBER):
            return self.frames[frame_number - 1]
        return None

    def _get_frame_or_raise(self, frame_number):
        frame = self.get_frame(frame_number)
        if frame is None:
            logging.error(
                'No frame was found for frame number : {}'.format(
                    frame_number))
            raise exceptions.FrameNotFoundException(frame_number)
        return frame

    def record_throw(self, frame_number, pins):
        """Records the pins knocked down by a throw in the given frame."""
        self._get_frame_or_raise(frame_number).throw_ball(pins)

    def record_marked_throw(self, frame_number, is_strike=False,
                            is_spare=False):
        """Records a throw marked as a strike or a spare in the given frame."""
        self._get_frame_or_raise(frame_number).throw_marked_ball(
            is_strike=is_strike, is_spare=is_spare)

    def record_mark(self, frame_number, mark):
        """Records a throw given by its scoresheet mark in the given frame."""
        self._get_frame_or_raise(frame_number).throw_mark(mark)

    def clear_all_frames(self):
        """Clears all the frames so that a new game can be played."""
        for frame in self.frames:
            frame.clear()
        self.carried_score = 0
        self.is_complete = False

    def scorecard(self):
        """Returns a serialized snapshot of the frames and the score."""
        return serializers.GameSerializer(self).data

    def _next_two_balls(self, frame_number):
        """Returns the pins of the two throws following the given frame.

        If the next frame is a strike (other than in the last frame), then its
        second slot is empty and the first throw of the frame after it is used.
        """
        next_frame = self.get_frame(frame_number + 1)
        if next_frame is None:
            return 0
        if next_frame.is_strike and not next_frame.is_last_frame:
            frame_after_next = self.get_frame(frame_number + 2)
            return next_frame.first_ball + (
                frame_after_next.first_ball
                if frame_after_next is not None else 0)
        return next_frame.first_ball + next_frame.second_ball

    def calculate_score(self, frame_number):
        """
        Calculates the cumulative score of every frame preceding the given
        frame, and returns the score of the game up to that frame.

        Raises FrameNotFoundException unless the frame number is 1 to 10.
        """
        self._get_frame_or_raise(frame_number)
        score = 0
        for frame in self.frames[:frame_number - 1]:
            if frame.is_strike:
                score += constants.MAX_PINS + self._next_two_balls(
                    frame.number)
            elif frame.is_spare:
                score += constants.MAX_PINS + self.get_frame(
                    frame.number + 1).first_ball
            else:
                score += frame.total_pins_knocked
            frame.frame_score = score
        return score

    def _on_frame_complete(self, sender, frame_number, total_pins, **kwargs):
        self.carried_score = self.calculate_score(frame_number)
        for frame in self.frames[:frame_number - 1]:
            signals.score_updated.send(
                sender=self, frame_number=frame.number,
                score=frame.frame_score)

    def _on_all_frames_done(self, sender, **kwargs):
        sender.frame_score = sender.total_pins_knocked + self.carried_score
        self.is_complete = True
        signals.score_updated.send(
            sender=self, frame_number=sender.number, score=sender.frame_score)
        signals.end_of_game.send(sender=self, score=sender.frame_score)
        if sender.frame_score == constants.PERFECT_GAME_SCORE:
            signals.perfect_game.send(sender=self, score=sender.frame_score)
