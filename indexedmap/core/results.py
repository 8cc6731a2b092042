from typing import Any, NamedTuple


class LookupResult(NamedTuple):
    """
    Outcome of a non-raising lookup.

    Unpacks like a pair so callers can write ``found, value = m.try_get(k)``.
    ``value`` is None whenever ``found`` is False.
    """
    found: bool
    value: Any = None

    def __bool__(self) -> bool:
        return self.found


NOT_FOUND = LookupResult(False, None)
