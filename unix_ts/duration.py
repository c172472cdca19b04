from datetime import timedelta
from functools import total_ordering

from .exceptions import TimestampOverflowError
from .utils import (
    check_int, in_i64_range, NANOS_PER_MICRO, NANOS_PER_SECOND, normalize,
)


@total_ordering
class Duration:
    """A signed, nanosecond-resolution span of time.

    Stored like a Timestamp: whole ``seconds`` (signed 64-bit range) plus a
    non-negative ``nanos`` offset in ``[0, 10**9)``. A quarter second before
    zero is therefore ``Duration(-1, 750_000_000)``; ``Duration.from_nanos``
    builds such values from a single signed count.
    """

    __slots__ = ('_seconds', '_nanos')

    def __init__(self, seconds=0, nanos=0):
        check_int(seconds, 'seconds')
        check_int(nanos, 'nanos')
        if nanos < 0:
            raise ValueError(f"Invalid value for nanoseconds in Duration: {nanos}")
        seconds, nanos = normalize(seconds, nanos)
        if not in_i64_range(seconds):
            raise TimestampOverflowError(seconds)
        self._seconds = seconds
        self._nanos = nanos

    @classmethod
    def from_nanos(cls, ns):
        """Build a Duration from a signed count of nanoseconds."""
        check_int(ns, 'ns')
        seconds, nanos = divmod(ns, NANOS_PER_SECOND)
        return cls(seconds, nanos)

    @classmethod
    def from_timedelta(cls, td):
        """Build a Duration from a datetime.timedelta. This is exact."""
        micros = (td.days * 86400 + td.seconds) * 1_000_000 + td.microseconds
        return cls.from_nanos(micros * NANOS_PER_MICRO)

    @property
    def seconds(self):
        return self._seconds

    @property
    def nanos(self):
        return self._nanos

    def total_nanos(self):
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def to_timedelta(self):
        """Convert to a datetime.timedelta.

        timedelta only resolves microseconds, so this floors any remaining
        nanoseconds. Raises OverflowError past timedelta's range of
        999999999 days.
        """
        return timedelta(microseconds=self.total_nanos() // NANOS_PER_MICRO)

    def __neg__(self):
        return Duration.from_nanos(-self.total_nanos())

    def __pos__(self):
        return self

    def __abs__(self):
        if self._seconds < 0:
            return -self
        return self

    def __bool__(self):
        return self._seconds != 0 or self._nanos != 0

    def __add__(self, other):
        ns = as_nanos(other, allow_int=False)
        if ns is None:
            return NotImplemented
        return Duration.from_nanos(self.total_nanos() + ns)

    __radd__ = __add__

    def __sub__(self, other):
        ns = as_nanos(other, allow_int=False)
        if ns is None:
            return NotImplemented
        return Duration.from_nanos(self.total_nanos() - ns)

    def __rsub__(self, other):
        ns = as_nanos(other, allow_int=False)
        if ns is None:
            return NotImplemented
        return Duration.from_nanos(ns - self.total_nanos())

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __lt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) < (other._seconds, other._nanos)

    def __hash__(self):
        return hash((Duration, self._seconds, self._nanos))

    def __reduce__(self):
        return (Duration, (self._seconds, self._nanos))

    def __str__(self):
        total = self.total_nanos()
        sign = '-' if total < 0 else ''
        sec, nsec = divmod(abs(total), NANOS_PER_SECOND)
        return f"{sign}{sec}.{nsec:09d}"

    def __repr__(self):
        return f"Duration({self._seconds}, {self._nanos})"


def as_nanos(value, allow_int=True):
    """Return ``value`` as a signed nanosecond count, or None if unsupported.

    Durations and timedeltas are exact; plain integers count whole seconds.
    """
    if isinstance(value, Duration):
        return value.total_nanos()
    if isinstance(value, timedelta):
        return Duration.from_timedelta(value).total_nanos()
    if allow_int and isinstance(value, int) and not isinstance(value, bool):
        return value * NANOS_PER_SECOND
    return None
