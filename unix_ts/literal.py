from decimal import Decimal
import logging
import math
import re

from .exceptions import MalformedLiteralError
from .timestamp import Timestamp
from .utils import MAX_PRECISION, NANOS_PER_SECOND
from .validation import get_literal_truncation

log = logging.getLogger(__name__)

_LITERAL_RE = re.compile(r'^([+-]?)(\d*)(?:\.(\d*))?$')


def ts(literal):
    """Create a Timestamp from a Unix timestamp literal.

    ``literal`` may be an int (whole seconds) or a decimal number given as a
    str, Decimal or float. Fractional digits are a base-10 fraction of a
    second; negative values floor so the nanoseconds stay positive.

        ts(1335020400)         # Timestamp(1335020400, 0)
        ts("1335020400.25")    # Timestamp(1335020400, 250000000)
        ts("-.5")              # Timestamp(-1, 500000000)

    More than nine significant fractional digits raise MalformedLiteralError
    unless literal truncation is enabled (see unix_ts.validation), in which
    case the extra digits are dropped, rounding toward negative infinity.
    """
    if isinstance(literal, bool):
        raise TypeError('Timestamp literal must be a number or string, not bool')
    if isinstance(literal, int):
        return Timestamp.new(literal, 0)
    if isinstance(literal, float):
        if not math.isfinite(literal):
            raise MalformedLiteralError(literal)
        # repr() is the shortest string that round-trips, e.g. 0.1 -> '0.1'.
        text = format(Decimal(repr(literal)), 'f')
    elif isinstance(literal, Decimal):
        if not literal.is_finite():
            raise MalformedLiteralError(literal)
        text = format(literal, 'f')
    elif isinstance(literal, str):
        text = literal.strip()
    else:
        raise TypeError('Timestamp literal must be a number or string, not %s' % type(literal).__name__)
    return _parse_literal(literal, text)


def _parse_literal(literal, text):
    m = _LITERAL_RE.match(text)
    if not m or not (m.group(2) or m.group(3)):
        raise MalformedLiteralError(literal)
    sign, whole, frac = m.group(1), m.group(2), m.group(3) or ''

    dropped = frac[MAX_PRECISION:]
    if dropped.strip('0'):
        if not get_literal_truncation():
            raise MalformedLiteralError(
                literal,
                'Timestamp literal has more than %d fractional digits: %r' % (MAX_PRECISION, literal))
        log.debug("Truncating timestamp literal %r to nanosecond precision", literal)
    frac = frac[:MAX_PRECISION]

    total = int(whole or '0') * NANOS_PER_SECOND + int(frac.ljust(MAX_PRECISION, '0'))
    if sign == '-':
        # Dropped digits make the magnitude larger, so flooring moves one
        # nanosecond further from zero.
        if dropped.strip('0'):
            total += 1
        total = -total
    return Timestamp.from_nanos(total)
