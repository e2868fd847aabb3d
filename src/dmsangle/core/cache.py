from collections import OrderedDict
from typing import Optional

import structlog

from dmsangle.angles import Dms, to_dms

log = structlog.get_logger(__name__)


class DmsCache:
    """
    Memoizes the Dms derived from a decimal value.

    Owned by the caller; nothing is attached to the float itself. A Dms that
    was converted to decimal through `remember()` is returned as-is for that
    decimal, so its original components survive the round trip.

    Entries are immutable, so two callers racing on the same key at worst
    compute equal values twice.
    """

    def __init__(self, maxsize: Optional[int] = 1024):
        if maxsize is not None and maxsize <= 0:
            raise ValueError("maxsize must be a positive integer or None")
        self.maxsize = maxsize
        self._entries: "OrderedDict[float, Dms]" = OrderedDict()

    def get(self, value: float) -> Dms:
        key = float(value)
        dms = self._entries.get(key)
        if dms is None:
            dms = to_dms(key)
            self._store(key, dms)
        return dms

    def remember(self, dms: Dms) -> float:
        """Convert to decimal and keep `dms` as the angle for that decimal."""
        value = dms.to_decimal()
        self._store(value, dms)
        return value

    def clear(self) -> None:
        self._entries.clear()

    def _store(self, key: float, dms: Dms) -> None:
        self._entries[key] = dms
        if self.maxsize is not None and len(self._entries) > self.maxsize:
            evicted, _ = self._entries.popitem(last=False)
            log.debug("dms_cache_evicted", value=evicted, size=len(self._entries))

    def __contains__(self, value: object) -> bool:
        try:
            return float(value) in self._entries
        except (TypeError, ValueError):
            return False

    def __len__(self) -> int:
        return len(self._entries)
