"""Texture parameters and bookkeeping of hardware texture units."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral, Real

from flockmath.numeric import map_to_reverse_pairs


class ParamType(Enum):
    """Kind of value a texture parameter carries."""

    F = "f"
    I = "i"  # noqa: E741
    IV = "iv"
    FV = "fv"


def _classify(value: object) -> ParamType:
    if isinstance(value, bool):
        raise TypeError("a texture parameter cannot be a boolean")
    if isinstance(value, Integral):
        return ParamType.I
    if isinstance(value, Real):
        return ParamType.F
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        items = list(value)
        if not items:
            raise ValueError("a vector texture parameter needs at least one value")
        if any(isinstance(v, bool) or not isinstance(v, Real) for v in items):
            raise TypeError("vector texture parameters hold numbers only")
        if all(isinstance(v, Integral) for v in items):
            return ParamType.IV
        return ParamType.FV
    raise TypeError(f"unsupported texture parameter value: {type(value).__name__}")


@dataclass(frozen=True)
class TextureParameter:
    """A texture parameter name with an int, float, int vector or float vector value."""

    param_name: int
    value: object
    type: ParamType = field(init=False)

    def __post_init__(self) -> None:
        kind = _classify(self.value)
        if kind in (ParamType.IV, ParamType.FV):
            object.__setattr__(self, "value", tuple(self.value))  # type: ignore[arg-type]
        object.__setattr__(self, "type", kind)


class TextureUnitManager:
    """Tracks which texture is bound to each unit and how often each unit was used."""

    def __init__(self, max_units: int):
        if not isinstance(max_units, Integral) or isinstance(max_units, bool):
            raise TypeError("max_units must be an integer")
        if max_units <= 0:
            raise ValueError("the number of texture units must be positive")
        self.max_units = int(max_units)
        self.texture_locations: list[int] = [-1] * self.max_units
        self.hit_map: dict[int, int] = {unit: 0 for unit in range(self.max_units)}
        self.reversed_hit_map: list[tuple[int, int]] = []

    def request_textures(self, count: int) -> list[int]:
        """Return ``count`` texture units: free ones first, then ones from the hit map."""
        if count < 0:
            raise ValueError("the number of requested textures must not be negative")
        if count > self.max_units:
            raise ValueError(
                f"invalid texture request: {count} (max = {self.max_units})"
            )
        locations = [unit for unit, tex in enumerate(self.texture_locations) if tex == -1][:count]
        remaining = count - len(locations)
        candidates = reversed(self.reversed_hit_map)
        while remaining:
            try:
                _, unit = next(candidates)
            except StopIteration:
                raise RuntimeError(
                    f"no texture unit left for {remaining} request(s)"
                ) from None
            if unit not in locations:
                locations.append(unit)
                remaining -= 1
        self.sort_hit_map()
        return locations

    def sort_hit_map(self) -> None:
        """Rebuild the ``(hits, unit)`` list: fewest hits first, higher unit first on ties."""
        pairs = map_to_reverse_pairs(self.hit_map)
        self.reversed_hit_map = sorted(pairs, key=lambda pair: (pair[0], -pair[1]))

    def record_bind(self, location: int, texture_id: int) -> None:
        """Note that ``texture_id`` was bound to unit ``location``."""
        if not 0 <= location < self.max_units:
            raise ValueError(
                f"invalid texture location {location} (max = {self.max_units})"
            )
        self.texture_locations[location] = texture_id
        self.hit_map[location] += 1

    def is_bound(self, texture_id: int, location: int | None) -> bool:
        """Return True when ``texture_id`` is still bound at its last known unit."""
        if location is None or location == -1:
            return False
        return self.texture_locations[location] == texture_id

    def report(self) -> str:
        """Return a text report of unit hits with minimum and maximum."""
        if not self.reversed_hit_map:
            self.sort_hit_map()
        hits = "".join(f"{unit}=>{count} " for unit, count in sorted(self.hit_map.items()))
        return (
            "== HIT MAP ==\n"
            f"{hits}\n"
            "== Statistics ==\n"
            f"Min hits : {self.reversed_hit_map[0][0]}\n"
            f"Max hits : {self.reversed_hit_map[-1][0]}\n"
        )