from typing import Optional

from pydantic import BaseModel, Field

from wgscoord.domain.coordinate import CanonicalCoordinate


class CoordinateRecord(BaseModel):
    text: Optional[str] = Field(None, description="Input text, when parsed from text")
    longitude: float = Field(..., description="Degrees, 0 to 360, over 180 is West")
    latitude: float = Field(..., description="Degrees, negative is South")
    elevation: Optional[float] = Field(None, description="Metres AMSL")
    decimal: str
    dms: str

    @classmethod
    def from_coordinate(cls, coord: CanonicalCoordinate, text: Optional[str] = None) -> "CoordinateRecord":
        return cls(
            text=text,
            longitude=coord.longitude,
            latitude=coord.latitude,
            elevation=coord.elevation,
            decimal=coord.to_decimal(),
            dms=coord.to_dms(),
        )

    def to_coordinate(self) -> CanonicalCoordinate:
        return CanonicalCoordinate(self.longitude, self.latitude, self.elevation)
