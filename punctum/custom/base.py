from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar

from punctum.lexer.tokens import TokenLocation

if TYPE_CHECKING:
    from punctum.punct import Atom


def into_locations(
    locations: TokenLocation | Sequence[TokenLocation],
    count: int,
) -> tuple[TokenLocation, ...]:
    """Convert single location (broadcast) or exactly `count` locations into an tuple of locations."""
    if isinstance(locations, TokenLocation):
        return (locations,) * count

    if isinstance(locations, str) or not isinstance(locations, Sequence):
        msg = f"Expected an location or sequence of locations, but got {type(locations).__name__}"
        raise TypeError(msg)

    if len(locations) != count:
        msg = f"Expected exactly {count} locations (one per punctuation atom), but got {len(locations)}"
        raise ValueError(msg)

    if not all(isinstance(location, TokenLocation) for location in locations):
        msg = "Expected every location to be an TokenLocation"
        raise TypeError(msg)
    return tuple(locations)


class CustomPunctuation:
    """Base for generated punctuation token types, see `custom_punctuation`.

    Instance carries only locations of each atom of the symbol (provenance, not semantics).
    Locations are write-once, instances are immutable after construction.
    """

    __slots__ = ("_locations",)

    # Canonical text of the symbol
    SYMBOL: ClassVar[str]

    # Atoms the symbol consists of, left to right
    ATOMS: ClassVar[tuple[Atom, ...]]

    # Amount of locations each instance carries (amount of atoms)
    LENGTH: ClassVar[int]

    _locations: tuple[TokenLocation, ...]

    def __init__(
        self,
        locations: TokenLocation | Sequence[TokenLocation] | None = None,
    ) -> None:
        if locations is None:
            locations = TokenLocation.toolchain()
        object.__setattr__(self, "_locations", into_locations(locations, self.LENGTH))

    @property
    def locations(self) -> tuple[TokenLocation, ...]:
        return self._locations

    @property
    def location(self) -> TokenLocation:
        """Location of the first atom (where whole punctuation starts)."""
        return self._locations[0]

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"Cannot assign '{name}', {self.__class__.__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"Cannot delete '{name}', {self.__class__.__name__} is immutable"
        raise AttributeError(msg)
