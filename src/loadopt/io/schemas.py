"""Data schemas for packing job files."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from loadopt.core.units import Unit, parse_unit


class ItemLineSchema(BaseModel):
    """One line of a job: an item size and how many of it to load."""
    model_config = ConfigDict(extra="forbid")

    id: Optional[str] = Field(None, description="Item identifier (line id)")
    width: float = Field(gt=0, description="Width of the item")
    height: float = Field(gt=0, description="Height of the item (up axis)")
    depth: float = Field(gt=0, description="Depth of the item")
    weight: float = Field(ge=0, default=0.0, description="Weight of one item in kg")
    quantity: int = Field(ge=1, default=1, description="Number of identical items")


class ContainerSchema(BaseModel):
    """Schema for an explicit container."""
    model_config = ConfigDict(extra="forbid")

    width: float = Field(gt=0, description="Width of the container")
    height: float = Field(gt=0, description="Height of the container")
    depth: float = Field(gt=0, description="Depth of the container")
    max_weight: float = Field(gt=0, description="Maximum weight capacity in kg")


class PackingRequestSchema(BaseModel):
    """
    Schema for a packing job.

    Exactly one of ``container`` and ``profile`` must be given.  All linear
    figures of the job (items and explicit container) are in ``unit``.
    """
    model_config = ConfigDict(extra="forbid")

    unit: Unit = Field(Unit.CENTIMETER, description="Linear unit of the job")
    category: Optional[str] = Field(None, description="Product category, e.g. 'tiles'")
    container: Optional[ContainerSchema] = None
    profile: Optional[str] = Field(None, description="Name of a standard profile")
    items: List[ItemLineSchema] = Field(min_length=1, description="Item lines to pack")

    @field_validator("unit", mode="before")
    @classmethod
    def _parse_unit(cls, value):
        return parse_unit(value)

    @model_validator(mode="after")
    def _one_container_source(self) -> "PackingRequestSchema":
        if (self.container is None) == (self.profile is None):
            raise ValueError("give exactly one of 'container' or 'profile'")
        return self
