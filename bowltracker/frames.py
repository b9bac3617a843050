"""Module that encapsulates the throws of a single bowling frame."""
import logging

from bowltracker import constants
from bowltracker import exceptions
from bowltracker import models
from bowltracker import notation
from bowltracker import signals


class Frame(object):
    """
    An instance of this class holds the throws of one of the ten frames.

    Frames 1 to 9 hold at most two throws, and a single throw when the first
    one is a strike. The last frame holds a third (bonus) throw when the first
    throw was a strike or the first two throws made a spare.

    Once the frame's own pins are known, `signals.frame_complete` is sent with
    the frame number and the pins knocked down in this frame. The last frame
    follows it with `signals.all_frames_done`. The bonus of a strike or a spare
    is not known to the frame; it is added by the game.

    Attributes:
        number: frame number between 1 and 10
        throws: list of recorded throws
        frame_score: cumulative score of the game up to and including this
            frame, as calculated by the game
        total_pins_knocked: pins knocked down in this frame only
        is_resolved: True once no further throw is expected
    """

    def __init__(self, number):
        self.number = number
        self.throws = []
        self.frame_score = 0
        self.total_pins_knocked = 0
        self.is_resolved = False

    @property
    def is_last_frame(self):
        return self.number == constants.LAST_FRAME_NUMBER

    @property
    def is_strike(self):
        first_throw = self.get_throw(constants.FIRST_THROW_INDEX)
        return first_throw is not None and first_throw.is_strike

    @property
    def is_spare(self):
        second_throw = self.get_throw(constants.SECOND_THROW_INDEX)
        return (not self.is_strike and second_throw is not None and
                second_throw.is_spare)

    @property
    def is_normal(self):
        return not self.is_strike and not self.is_spare

    @property
    def count_of_throws(self):
        return len(self.throws)

    @property
    def first_ball(self):
        return self._pins_at(constants.FIRST_THROW_INDEX)

    @property
    def second_ball(self):
        return self._pins_at(constants.SECOND_THROW_INDEX)

    @property
    def last_ball(self):
        return self._pins_at(constants.LAST_THROW_INDEX)

    @property
    def pins_standing(self):
        """Number of pins the next throw can knock down."""
        if self.is_resolved:
            return 0
        if self._is_full_rack():
            return constants.MAX_PINS
        return constants.MAX_PINS - self.throws[-1].pins_knocked

    def get_throw(self, index):
        """Returns the throw at the given index, or None if there is none."""
        if 0 <= index < len(self.throws):
            return self.throws[index]
        return None

    def _pins_at(self, index):
        throw = self.get_throw(index)
        return throw.pins_knocked if throw is not None else 0

    def _is_full_rack(self):
        """Returns True if the next throw is bowled at ten standing pins.

        A full rack is set for the first throw of every frame. In the last frame
        it is set again after a strike, and after a spare.
        """
        if not self.throws:
            return True
        if not self.is_last_frame:
            return False
        previous_throw = self.throws[-1]
        return previous_throw.is_strike or previous_throw.is_spare

    def clear(self):
        """Clears the throws and the scores so the frame can be played again."""
        del self.throws[:]
        self.frame_score = self.total_pins_knocked = 0
        self.is_resolved = False

    def throw_ball(self, pins):
        """Records a throw given the number of pins knocked down."""
        self.accept(models.Delivery.of_pins(pins))

    def throw_marked_ball(self, is_strike=False, is_spare=False):
        """Records a throw marked as a strike or a spare.

        A throw marked as neither is a gutter ball.
        """
        self.accept(models.Delivery.from_marker(is_strike, is_spare))

    def throw_mark(self, mark):
        """Records a throw given its scoresheet mark, e.g. 'X', '/' or '7'."""
        self.accept(notation.parse_mark(mark))

    def accept(self, delivery):
        """Records the delivery, and resolves the frame when it is over.

        Raises:
            FrameCompleteException if the frame has already been resolved
            InvalidDeliveryException if a strike is reported at a partial rack
                or a spare is reported at a full rack
        """
        if self.is_resolved:
            raise exceptions.FrameCompleteException(self.number)

        is_full_rack = self._is_full_rack()
        if ((delivery.kind == models.DELIVERY_SPARE and is_full_rack) or
                (delivery.kind == models.DELIVERY_STRIKE and
                 not is_full_rack)):
            raise exceptions.InvalidDeliveryException(
                delivery.kind, self.number)

        pins_standing = self.pins_standing
        throw = models.Throw(delivery.pins_knocked(pins_standing))
        if is_full_rack:
            throw.mark(is_strike=throw.pins_knocked == constants.MAX_PINS)
        else:
            throw.mark(is_spare=throw.pins_knocked == pins_standing)
        self.throws.append(throw)
        logging.debug('Frame {}: throw {} knocked {} pins.'.format(
            self.number, self.count_of_throws, throw.pins_knocked))

        if self.is_last_frame:
            self._accept_last_frame_throw()
        else:
            self._accept_standard_throw()

    def _accept_standard_throw(self):
        if self.count_of_throws == 1 and not self.is_strike:
            # Wait for the second throw.
            return
        self._resolve(sum(throw.pins_knocked for throw in self.throws))

    def _accept_last_frame_throw(self):
        if self.count_of_throws == 1:
            return
        if (self.count_of_throws == constants.STANDARD_FRAME_THROWS and
                (self.is_strike or self.is_spare)):
            # A bonus throw is due. A second throw following a strike is bowled
            # at a full rack and can never be a spare.
            return
        self._resolve(sum(throw.pins_knocked for throw in self.throws))
        signals.all_frames_done.send(sender=self)

    def _resolve(self, total_pins_knocked):
        self.total_pins_knocked = total_pins_knocked
        self.is_resolved = True
        logging.debug('Frame {} is complete with {} pins.'.format(
            self.number, total_pins_knocked))
        signals.frame_complete.send(
            sender=self, frame_number=self.number,
            total_pins=total_pins_knocked)

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)
