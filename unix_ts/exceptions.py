class UnixTsError(Exception):
    """Base class for errors raised by unix_ts."""


class TimestampOverflowError(UnixTsError, OverflowError):
    """The whole-seconds field left the signed 64-bit range."""

    def __init__(self, seconds, *args):
        self.seconds = seconds
        if not args:
            args = ('Seconds value out of signed 64-bit range: %d' % seconds,)
        super(TimestampOverflowError, self).__init__(*args)


class MalformedLiteralError(UnixTsError, ValueError):
    """A timestamp literal could not be decomposed into seconds and nanos."""

    def __init__(self, literal, *args):
        self.literal = literal
        if not args:
            args = ('Invalid timestamp literal: {0!r}'.format(literal),)
        super(MalformedLiteralError, self).__init__(*args)


class CalendarRangeError(UnixTsError, OverflowError):
    """A timestamp can not be represented as a calendar date-time."""

    def __init__(self, timestamp, *args):
        self.timestamp = timestamp
        if not args:
            args = ('Timestamp out of range for datetime: %r' % (timestamp,),)
        super(CalendarRangeError, self).__init__(*args)
