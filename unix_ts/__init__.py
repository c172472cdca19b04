#!/usr/bin/python

from . import duration, literal, timestamp, validation

__all__ = ['Timestamp', 'Duration', 'ts']

from .timestamp import Timestamp
from .duration import Duration
from .literal import ts

from .exceptions import UnixTsError
from .exceptions import TimestampOverflowError
from .exceptions import MalformedLiteralError
from .exceptions import CalendarRangeError

from .validation import enable_literal_truncation
from .validation import disable_literal_truncation
from .validation import get_literal_truncation

if __name__ == '__main__':
    t = ts("1335020400.25")
    print(repr(t), f"{t:.3}", t.at_precision(3))
