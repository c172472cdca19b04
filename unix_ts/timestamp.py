from decimal import Context, Decimal
from functools import total_ordering
import re

from .duration import as_nanos, Duration
from .exceptions import TimestampOverflowError
from .utils import (
    check_int, in_i64_range, NANOS_PER_MICRO, NANOS_PER_MILLI,
    NANOS_PER_SECOND, normalize, precision_scale,
)

_FORMAT_SPEC_RE = re.compile(r'^\.(\d+)$')


@total_ordering
class Timestamp:
    """A nanosecond-resolution Unix timestamp.

    A Timestamp holds the whole ``seconds`` since 1970-01-01T00:00:00Z
    (signed, within the 64-bit range) and a ``nanos`` offset within that
    second. ``nanos`` is always in ``[0, 10**9)`` and is always a positive
    offset, so a quarter second before the epoch is
    ``Timestamp(-1, 750_000_000)``.

    Timestamps are immutable. Arithmetic returns new instances and any
    result whose seconds leave the 64-bit range raises
    TimestampOverflowError rather than wrapping.

    The ``ts()`` helper is usually more convenient than calling the
    constructor directly:

        from unix_ts import ts

        t = ts("1335020400.25")
        t.seconds    # 1335020400
        t.subsec(3)  # 250
    """

    __slots__ = ('_seconds', '_nanos')

    def __init__(self, seconds, nanos=0):
        check_int(seconds, 'seconds')
        check_int(nanos, 'nanos')
        if nanos < 0:
            raise ValueError(f"Invalid value for nanoseconds in Timestamp: {nanos}")
        seconds, nanos = normalize(seconds, nanos)
        if not in_i64_range(seconds):
            raise TimestampOverflowError(seconds)
        self._seconds = seconds
        self._nanos = nanos

    @classmethod
    def new(cls, seconds, nanos):
        """Create a timestamp from ``seconds`` and ``nanos`` (nanoseconds).

        ``nanos`` of a second or more is folded into ``seconds``.
        """
        return cls(seconds, nanos)

    @classmethod
    def from_whole_seconds(cls, seconds):
        return cls(seconds, 0)

    @classmethod
    def from_millis(cls, ms):
        """Create a timestamp from signed milliseconds since the epoch.

        Negative values floor, so ``from_millis(-500)`` is
        ``Timestamp(-1, 500_000_000)``.
        """
        check_int(ms, 'ms')
        return cls.from_nanos(ms * NANOS_PER_MILLI)

    @classmethod
    def from_micros(cls, us):
        """Create a timestamp from signed microseconds since the epoch."""
        check_int(us, 'us')
        return cls.from_nanos(us * NANOS_PER_MICRO)

    @classmethod
    def from_nanos(cls, ns):
        """Create a timestamp from signed nanoseconds since the epoch."""
        check_int(ns, 'ns')
        seconds, nanos = divmod(ns, NANOS_PER_SECOND)
        return cls(seconds, nanos)

    @classmethod
    def from_duration(cls, duration):
        """Create the timestamp ``duration`` after the epoch.

        Accepts a Duration or a datetime.timedelta.
        """
        ns = as_nanos(duration, allow_int=False)
        if ns is None:
            raise TypeError('Expected a Duration or timedelta, not %s' % type(duration).__name__)
        return cls.from_nanos(ns)

    @classmethod
    def from_datetime(cls, dt):
        """Create a timestamp from a datetime. Naive datetimes are taken as UTC."""
        from .datetimes import from_datetime
        return from_datetime(dt)

    @property
    def seconds(self):
        """The whole seconds since the epoch. Sub-second values are discarded."""
        return self._seconds

    @property
    def nanos(self):
        return self._nanos

    def at_precision(self, e):
        """Return the time since the epoch as an integer count of 10**-e seconds.

        Args:
            e: The precision as a power of 10 (3 for milliseconds, 6 for
                microseconds, 9 for nanoseconds). Precisions above 9 are
                zero-padded past nanosecond resolution.

        Raises:
            ValueError: If ``e`` is negative.

        Example:

            Timestamp(1335020400, 123456789).at_precision(3)  # 1335020400123
        """
        divisor, multiplier = precision_scale(e)
        return self._seconds * 10 ** e + self._nanos * multiplier // divisor

    def subsec(self, e):
        """Return the sub-second component at 10**-e resolution.

        ``subsec(3)`` is milliseconds, discarding finer precision. Precisions
        above 9 are zero-padded past nanosecond resolution.
        """
        divisor, multiplier = precision_scale(e)
        return self._nanos * multiplier // divisor

    def to_duration(self):
        """Return the exact Duration elapsed since the epoch."""
        return Duration(self._seconds, self._nanos)

    def to_timedelta(self):
        """Return the time since the epoch as a timedelta, floored to microseconds."""
        return self.to_duration().to_timedelta()

    def to_datetime(self, tz):
        """Convert to an aware datetime in ``tz`` (a tzinfo or an IANA zone name)."""
        from .datetimes import to_datetime
        return to_datetime(self, tz)

    def to_utc_datetime(self):
        from .datetimes import to_utc_datetime
        return to_utc_datetime(self)

    def to_naive_datetime(self):
        from .datetimes import to_naive_datetime
        return to_naive_datetime(self)

    def _total_nanos(self):
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def __add__(self, other):
        ns = as_nanos(other)
        if ns is None:
            return NotImplemented
        return Timestamp.from_nanos(self._total_nanos() + ns)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Timestamp):
            return Duration.from_nanos(self._total_nanos() - other._total_nanos())
        ns = as_nanos(other)
        if ns is None:
            return NotImplemented
        return Timestamp.from_nanos(self._total_nanos() - ns)

    def __mod__(self, other):
        # Position within a period of whole seconds, e.g. % 86400 for time of day.
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Timestamp(self._seconds % other, self._nanos)

    def __eq__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __lt__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return (self._seconds, self._nanos) < (other._seconds, other._nanos)

    def __hash__(self):
        return hash((Timestamp, self._seconds, self._nanos))

    def __int__(self):
        # Lossy: the sub-second component is dropped.
        return self._seconds

    def __float__(self):
        return float(self._seconds) + float(self._nanos) / 1e9

    def __reduce__(self):
        return (Timestamp, (self._seconds, self._nanos))

    def __str__(self):
        return str(self._seconds)

    def __format__(self, format_spec):
        """Format as seconds, or as decimal seconds with ``.N`` digits.

            f"{ts(1335020400):.2}"  # '1335020400.00'
        """
        if not format_spec:
            return str(self)
        m = _FORMAT_SPEC_RE.match(format_spec)
        if not m:
            raise ValueError('Invalid format specifier for Timestamp: ' + format_spec)
        value = Decimal(self._total_nanos()).scaleb(-9, Context(prec=40))
        return format(value, '.%sf' % m.group(1))

    def __repr__(self):
        return f"Timestamp({self._seconds}, {self._nanos})"
