from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from eventfinder.core.clock import as_utc, utc_now


class SchemaBase(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class EventCreate(SchemaBase):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=3, max_length=100)
    description: str = Field(min_length=10, max_length=1000)
    location: str = Field(min_length=3, max_length=200)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    date: datetime
    max_participants: int = Field(ge=1, le=10000)
    current_participants: int = Field(default=0, ge=0)

    @field_validator("date", mode="after")
    @classmethod
    def _validate_date(cls, value: datetime) -> datetime:
        value = as_utc(value)
        if value < utc_now():
            raise ValueError("Event date cannot be in the past")
        return value

    @model_validator(mode="after")
    def _validate_participants(self):
        if self.current_participants > self.max_participants:
            raise ValueError("Current participants cannot exceed maximum participants")
        return self


class EventOut(SchemaBase):
    id: str
    title: str
    description: str
    location: str
    latitude: float | None = None
    longitude: float | None = None
    date: datetime
    max_participants: int
    current_participants: int
    created_at: datetime
    updated_at: datetime


class EventResponse(SchemaBase):
    success: bool = True
    data: EventOut
    message: str | None = None


class EventListResponse(SchemaBase):
    success: bool = True
    data: list[EventOut]
    count: int = Field(ge=0)
