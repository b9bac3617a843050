"""Validators for the values a presentation layer forwards to a game."""

from django.core import exceptions

from bowltracker import constants


MARK_STRIKE = 'X'
MARK_SPARE = '/'
MARK_GUTTER = '-'

SYMBOLIC_MARKS = (MARK_STRIKE, MARK_SPARE, MARK_GUTTER)


def validate_pins(value, pins_standing=constants.MAX_PINS):
    """Validates the pins knocked down against the pins left on the rack."""
    if value < 0 or value > pins_standing:
        raise exceptions.ValidationError(
            ('The pins knocked %(value)s are invalid. '
             'The pins must be between 0 and %(standing)s.' % {
                 'value': value, 'standing': pins_standing}))


def validate_mark(value):
    """Validates a scoresheet mark: 'X', '/', '-' or a pin count."""
    if not isinstance(value, str):
        raise exceptions.ValidationError(
            'The mark must be a string, not %s.' % type(value).__name__)
    if value.upper() in SYMBOLIC_MARKS:
        return
    try:
        validate_pins(int(value))
    except ValueError:
        raise exceptions.ValidationError(
            'The mark must be between 0 and 10, \'X\', \'/\' or \'-\'.')
