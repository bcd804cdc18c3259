"""
Pydantic models for car data.

``CarBase`` holds the descriptive fields shared by all car payloads.
``NewCar`` is what a client submits: everything except the license
plate, which the server always generates.  ``Car`` is a stored record.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class CarBase(BaseModel):
    brand: str = Field(..., examples=["Volvo"])
    model: str = Field(..., examples=["V60"])
    year: Optional[str] = Field(None, examples=["2019"])


class NewCar(CarBase):
    """Schema for adding a car."""

    id: UUID


class Car(NewCar):
    """Schema for a stored car.

    Stored cars are never updated, so the model is frozen.
    """

    license_plate: str = Field(..., examples=["ABC 12D"])

    model_config = {
        "frozen": True,
    }


class LicensePlate(BaseModel):
    """A generated license plate."""

    value: str = Field(..., examples=["ÅKE 37T"])
