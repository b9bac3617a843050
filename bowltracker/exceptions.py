"""Encapsulates all exceptions raised by the bowling scoring engine."""


class ScoringException(Exception):
    """Base class for all scoring exceptions."""


class FrameNotFoundException(ScoringException):
    def __init__(self, frame_number):
        self.frame_number = frame_number
        super(FrameNotFoundException, self).__init__(
            'No frame was found for frame number: {}.'.format(frame_number))


class FrameCompleteException(ScoringException):
    """A throw was recorded against a frame that has already been resolved."""
    def __init__(self, frame_number):
        self.frame_number = frame_number
        super(FrameCompleteException, self).__init__(
            'Frame: {} has already been played.'.format(frame_number))


class InvalidDeliveryException(ScoringException):
    """The pins knocked by a marked throw can not be inferred.

       1. a spare needs a previous throw on the same rack.
       2. a strike needs a full rack.
       3. a throw can not be marked both as a strike and a spare.
    """
    def __init__(self, kind, frame_number=None):
        self.kind = kind
        self.frame_number = frame_number
        if frame_number is None:
            message = 'Pins knocked by a {} can not be inferred.'.format(kind)
        else:
            message = ('A {kind} can not be thrown at this point of '
                       'frame: {frame}.'.format(kind=kind, frame=frame_number))
        super(InvalidDeliveryException, self).__init__(message)
