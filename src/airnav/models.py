"""Pydantic v2 models for airnav."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class PolarVector(BaseModel):
    """A wind or airspeed vector: compass direction plus magnitude.

    Direction is whole degrees and is not range-checked; negative or
    >= 360 values are accepted and treated as circular.
    """

    model_config = ConfigDict(frozen=True)

    direction: int
    speed: float = Field(ge=0)


class Headwind(BaseModel):
    """Along-track component opposing travel."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["headwind"] = "headwind"
    magnitude: float = Field(ge=0)


class Tailwind(BaseModel):
    """Along-track component aiding travel."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tailwind"] = "tailwind"
    magnitude: float = Field(ge=0)


class LeftCross(BaseModel):
    """Across-track component from the left."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["left"] = "left"
    magnitude: float = Field(ge=0)


class RightCross(BaseModel):
    """Across-track component from the right."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["right"] = "right"
    magnitude: float = Field(ge=0)


BaseComponent = Annotated[Union[Headwind, Tailwind], Field(discriminator="kind")]
CrossComponent = Annotated[Union[LeftCross, RightCross], Field(discriminator="kind")]


class WindComponents(BaseModel):
    """Wind broken into base (head/tail) and cross (left/right) components."""

    model_config = ConfigDict(frozen=True)

    base: BaseComponent
    cross: CrossComponent

    @property
    def headwind_kt(self) -> float:
        """Signed base component: positive = headwind, negative = tailwind."""
        if isinstance(self.base, Headwind):
            return self.base.magnitude
        return -self.base.magnitude

    @property
    def crosswind_kt(self) -> float:
        """Signed cross component: positive = from right, negative = from left."""
        if isinstance(self.cross, RightCross):
            return self.cross.magnitude
        return -self.cross.magnitude


class Runway(BaseModel):
    """A runway designator and its heading."""

    model_config = ConfigDict(frozen=True)

    name: str
    heading_deg: int


class RunwayWind(BaseModel):
    """Wind components resolved against one runway."""

    model_config = ConfigDict(frozen=True)

    runway: Runway
    components: WindComponents
