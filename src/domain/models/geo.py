from __future__ import annotations

import struct
from dataclasses import dataclass


def _bits(value: float) -> int:
    return struct.unpack("<q", struct.pack("<d", value))[0]


@dataclass(frozen=True, slots=True, eq=False)
class Coordinate:
    """A latitude/longitude pair in decimal degrees.

    Equality and hashing compare the IEEE-754 bit patterns of both fields, so
    identical lookups always share a cache slot while numerically close (or
    signed-zero) points never collide. No range validation is performed.
    """

    lat: float
    lon: float

    @property
    def latitude(self) -> float:
        return self.lat

    @property
    def longitude(self) -> float:
        return self.lon

    def _key(self) -> tuple[int, int]:
        return (_bits(self.lat), _bits(self.lon))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())
