"""Data model shared by the catalog loader, the engine and the servers"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

Channel = Annotated[int, Field(ge=0, le=255)]
ChannelTriplet = tuple[Channel, Channel, Channel]


class InkEntry(BaseModel):
    """One scanned ink; `color` is canonical RGB"""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    color: ChannelTriplet


class InkMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    maker: str
    short_name: str
    full_name: str
    scan_date: str


class ScoredInk(BaseModel):
    """An ink ranked against a target color; lower distance is closer"""

    model_config = ConfigDict(frozen=True)

    ink: InkEntry
    distance: float = Field(ge=0)


class InkResult(BaseModel):
    """Ink as returned to clients, with the metadata join and site links"""

    id: str
    display_name: str
    color: ChannelTriplet
    hex: str
    distance: Optional[float] = None
    metadata: Optional[InkMetadata] = None
    detail_url: str
    image_url: str


class Palette(BaseModel):
    theme: str
    harmony: Optional[str] = None
    targets: list[ChannelTriplet]
    inks: list[ScoredInk]

    @property
    def description(self) -> str:
        return (
            f"A curated palette of {len(self.inks)} fountain pen inks "
            f"matching the {self.theme} theme."
        )


class TemperatureAnalysis(BaseModel):
    kelvin: int
    category: str
    description: str
    intensity: float
    seasonal_match: list[str]
    complementary_temperature: int


class PaletteTemperature(BaseModel):
    average_temperature: int
    temperature_range: tuple[int, int]
    dominant_category: str
    temperature_harmony: str
