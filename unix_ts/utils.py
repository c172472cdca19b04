NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
MAX_PRECISION = 9

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


def check_int(value, name):
    # bool is an int subclass but never a meaningful count of seconds.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError('%s must be an integer, not %s' % (name, type(value).__name__))
    return value


def in_i64_range(value: int) -> bool:
    return I64_MIN <= value <= I64_MAX


def normalize(seconds: int, nanos: int):
    """Fold ``nanos`` into ``seconds`` so that ``0 <= nanos < 10**9``.

    Negative ``nanos`` borrow from ``seconds``.
    """
    carry, nanos = divmod(nanos, NANOS_PER_SECOND)
    return seconds + carry, nanos


def precision_scale(e):
    """Return ``(divisor, multiplier)`` turning nanoseconds into 10**-e ticks."""
    check_int(e, 'precision')
    if e < 0:
        raise ValueError('Precision must be non-negative, got %d' % e)
    if e <= MAX_PRECISION:
        return 10 ** (MAX_PRECISION - e), 1
    return 1, 10 ** (e - MAX_PRECISION)
