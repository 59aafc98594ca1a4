"""
Pydantic models for the stream demos.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class Person(BaseModel):
    """Immutable person record used by the grouping and aggregation demos"""
    name: str = Field(..., description="Display name")
    age: int = Field(..., description="Age in years")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {"name": "Max", "age": 18}
        }
    )

    def __str__(self):
        return self.name


def sample_persons() -> List[Person]:
    """The four people every demo section works with"""
    return [
        Person(name="Max", age=18),
        Person(name="Peter", age=23),
        Person(name="Pamela", age=23),
        Person(name="David", age=12),
    ]
