import os


def _init_literal_truncation() -> bool:
    """Retrieve literal truncation setting from environment."""
    return os.environ.get("UNIX_TS_TRUNCATE_LITERALS", 'False').lower() in ('true', '1', 't')


_literal_truncation = _init_literal_truncation()


def get_literal_truncation() -> bool:
    global _literal_truncation
    return _literal_truncation


def enable_literal_truncation():
    """Drop fractional digits beyond nanosecond precision in ts() literals."""
    global _literal_truncation
    _literal_truncation = True


def disable_literal_truncation():
    """Reject ts() literals with more than nine fractional digits."""
    global _literal_truncation
    _literal_truncation = False
