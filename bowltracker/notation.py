"""Translates scoresheet marks into deliveries.

The accepted marks for a single throw are given below:

1. X (strike)

2. / (spare of the pins left by the previous throw)

3. - (gutter ball)

4. <0-10> (number of pins knocked down)

Marks are case-insensitive, so 'x' is a strike as well.
"""
from bowltracker import constants
from bowltracker import models
from bowltracker import validators


def parse_mark(mark):
    """Parses a single scoresheet mark and returns its delivery.

    Raises:
        django.core.exceptions.ValidationError if the mark is malformed.
    """
    validators.validate_mark(mark)
    mark = mark.upper()
    if mark == validators.MARK_STRIKE:
        return models.Delivery.strike()
    if mark == validators.MARK_SPARE:
        return models.Delivery.spare()
    if mark == validators.MARK_GUTTER:
        return models.Delivery.of_pins(constants.GUTTER)
    return models.Delivery.of_pins(int(mark))

