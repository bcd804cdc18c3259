"""Pydantic model for a car owner."""

from pydantic import BaseModel


class Person(BaseModel):
    id: str
    name: str

    model_config = {
        "frozen": True,
    }
