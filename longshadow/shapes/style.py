"""Fill models for drawn shapes."""

from __future__ import annotations

from pydantic import BaseModel, Field

from longshadow.shapes.point import Point


class Color(BaseModel):
    """RGB in [0, 1] plus alpha in [0, 1]."""

    red: float = Field(default=0.0, ge=0.0, le=1.0)
    green: float = Field(default=0.0, ge=0.0, le=1.0)
    blue: float = Field(default=0.0, ge=0.0, le=1.0)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @property
    def hex(self) -> str:
        return "#" + "".join(f"{round(c * 255):02x}" for c in (self.red, self.green, self.blue))


class GradientStop(BaseModel):
    color: Color
    offset: float = Field(ge=0.0, le=1.0)  # position along origin -> destination


class LinearGradient(BaseModel):
    """A gradient painted between two points in user space."""

    stops: list[GradientStop] = Field(min_length=2)
    origin: tuple[float, float]
    destination: tuple[float, float]

    @classmethod
    def between(cls, origin: Point, destination: Point, stops: list[GradientStop]) -> LinearGradient:
        return cls(stops=stops, origin=(origin.x, origin.y), destination=(destination.x, destination.y))


Fill = Color | LinearGradient
