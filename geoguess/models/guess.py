from datetime import datetime
from typing import Literal, Tuple, Union
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, field_serializer
from .filters import REFERENCE_ID_PATTERN

class GeoPoint(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    type: Literal["Point"]
    coordinates: Tuple[float, float] = Field(..., description="[longitude, latitude]")

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]

class GuessCreate(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    user_id: str = Field(..., pattern=REFERENCE_ID_PATTERN)
    thumbnail_id: str = Field(..., pattern=REFERENCE_ID_PATTERN)
    score: float
    location: GeoPoint

class Guess(BaseModel):
    id: UUID
    user_id: str
    thumbnail_id: str
    score: float
    location: GeoPoint
    created_at: datetime

    @field_serializer('score', when_used='json')
    def serialize_score(self, score: float) -> Union[int, float]:
        # Whole scores go out as integers, the way clients send them
        return int(score) if float(score).is_integer() else score

    @classmethod
    def from_record(cls, record) -> "Guess":
        """Build a guess from a `guesses` table row"""
        return cls(
            id=record['id'],
            user_id=record['user_id'],
            thumbnail_id=record['thumbnail_id'],
            score=record['score'],
            location=GeoPoint(
                type="Point",
                coordinates=(record['longitude'], record['latitude'])
            ),
            created_at=record['created_at']
        )
