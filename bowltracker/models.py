"""Plain records describing a single ball delivery.

Nothing in this module is persisted; the classes are in-memory values owned by
a :class:`bowltracker.frames.Frame`.
"""
import collections

from bowltracker import constants
from bowltracker import exceptions


DELIVERY_PINS = 'pins'
DELIVERY_STRIKE = 'strike'
DELIVERY_SPARE = 'spare'


class Throw(object):
    """
    An instance of this class holds the outcome of one ball delivery.

    Attributes:
        pins_knocked: number of pins knocked down by the delivery
        is_strike: True if the delivery knocked down a full rack
        is_spare: True if the delivery cleared the pins left by the previous
            delivery on the same rack
    """

    def __init__(self, pins_knocked=constants.GUTTER):
        self.pins_knocked = pins_knocked
        self.is_strike = False
        self.is_spare = False

    @property
    def is_gutter(self):
        return self.pins_knocked == constants.GUTTER

    def knock_down(self, pins_knocked):
        """Back-fills the pins of a throw created without a pin count."""
        self.pins_knocked = pins_knocked

    def mark(self, is_strike=False, is_spare=False):
        self.is_strike = is_strike
        self.is_spare = is_spare

    def __eq__(self, other):
        if not isinstance(other, Throw):
            return NotImplemented
        return (self.pins_knocked == other.pins_knocked and
                self.is_strike == other.is_strike and
                self.is_spare == other.is_spare)

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class Delivery(collections.namedtuple('Delivery', ['kind', 'pins'])):
    """What the bowler reported for a throw: a pin count, a strike or a spare.

    A strike and a spare carry no pin count of their own; the count is
    inferred from the pins standing when the delivery is accepted.
    """
    __slots__ = ()

    @classmethod
    def of_pins(cls, pins):
        return cls(DELIVERY_PINS, pins)

    @classmethod
    def strike(cls):
        return cls(DELIVERY_STRIKE, None)

    @classmethod
    def spare(cls):
        return cls(DELIVERY_SPARE, None)

    @classmethod
    def from_marker(cls, is_strike=False, is_spare=False):
        """Returns the delivery for a strike/spare marker.

        A throw marked neither as a strike nor as a spare is a gutter ball.
        """
        if is_strike and is_spare:
            raise exceptions.InvalidDeliveryException(
                '{} and {}'.format(DELIVERY_STRIKE, DELIVERY_SPARE))
        if is_strike:
            return cls.strike()
        if is_spare:
            return cls.spare()
        return cls.of_pins(constants.GUTTER)

    def pins_knocked(self, pins_standing):
        """Returns the pins knocked down given the pins left on the rack."""
        if self.kind == DELIVERY_STRIKE:
            return constants.MAX_PINS
        if self.kind == DELIVERY_SPARE:
            return pins_standing
        return self.pins
