from abc import ABC, abstractmethod

from claim_engine.domain.value_objects import ClaimLocation


class IRegionProtection(ABC):
    """
    An interface (Port) for an external region-protection system that can
    mark parts of a world as off-limits for claiming.
    """

    @abstractmethod
    def has_protected_region(self, location: ClaimLocation) -> bool:
        """
        True if any protected region intersects the chunk.
        """
        pass
