from typing import Iterable, Set

from claim_engine.application.ports.region_protection import IRegionProtection
from claim_engine.domain.value_objects import ClaimLocation


class InMemoryRegionProtection(IRegionProtection):
    """
    Region protection backed by a fixed set of protected chunks.
    Stands in for an external region-protection system in tests and the demo.
    """
    _protected: Set[ClaimLocation]

    def __init__(self, protected: Iterable[ClaimLocation] = ()):
        self._protected = set(protected)

    def protect(self, location: ClaimLocation) -> None:
        self._protected.add(location)

    def has_protected_region(self, location: ClaimLocation) -> bool:
        return location in self._protected
