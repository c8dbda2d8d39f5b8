"""Image records as the round engine sees them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Coast(str, Enum):
    WEST = 'west'
    EAST = 'east'

    @classmethod
    def parse(cls, value: Any, *, lenient: bool = False) -> "Coast":
        """Coerce a raw coast value, raising ValueError when it is neither coast.

        Guesses must be exactly 'west' or 'east'. With ``lenient`` the value is
        stripped and lower-cased first, which hand-edited manifests need.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if lenient:
                value = value.strip().lower()
            try:
                return cls(value)
            except ValueError:
                pass
        raise ValueError(f"coast must be 'west' or 'east', got {value!r}")


@dataclass(frozen=True)
class ImageRecord:
    id: str
    file: str
    city: str
    coast: Coast

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImageRecord":
        """Build a record from a manifest entry.

        Raises ValueError for a missing id/file/city or an unknown coast.
        """
        for key in ('id', 'file', 'city'):
            if not isinstance(data.get(key), str) or not data[key].strip():
                raise ValueError(f"image record is missing '{key}'")
        return cls(
            id=data['id'],
            file=data['file'],
            city=data['city'],
            coast=Coast.parse(data.get('coast'), lenient=True),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            'id': self.id,
            'file': self.file,
            'city': self.city,
            'coast': self.coast.value,
        }
