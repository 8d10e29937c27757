from pydantic import BaseModel, ConfigDict
from typing import List


class ImmutableValueObject(BaseModel):
    """
    A base class for value objects to ensure they are immutable.
    Value objects are compared by their values, not their identity.
    """
    model_config = ConfigDict(frozen=True)


class ClaimLocation(ImmutableValueObject):
    """
    A single claimable territory unit (a chunk) in a named world.
    Two locations are equal when world and chunk coordinates match.
    """
    world_name: str
    chunk_x: int
    chunk_z: int

    def relative(self, dx: int, dz: int) -> "ClaimLocation":
        """Returns the location offset by the given number of chunks."""
        return ClaimLocation(world_name=self.world_name, chunk_x=self.chunk_x + dx, chunk_z=self.chunk_z + dz)

    def neighbours(self) -> List["ClaimLocation"]:
        """The four orthogonally adjacent chunks (north, east, south, west)."""
        return [
            self.relative(0, -1),
            self.relative(1, 0),
            self.relative(0, 1),
            self.relative(-1, 0),
        ]

    def __str__(self) -> str:
        return f"{self.world_name}:{self.chunk_x},{self.chunk_z}"
