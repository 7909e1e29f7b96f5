"""Pydantic model for a single event as returned by the AI service.

The AI is instructed to answer with a JSON array whose elements carry
exactly ``mainArtist``, ``fullLineup``, ``date`` and ``location``.
:class:`ExtractedEvent` validates one such element; unknown keys are
ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExtractedEvent(BaseModel):
    """One flyer entry extracted by the AI.

    Attributes:
        main_artist: Headlining artist (wire name ``mainArtist``).
        full_lineup: Comma-separated list of every billed artist (wire
            name ``fullLineup``).  May be empty.
        date: Event date as a ``YYYY-MM-DD`` string.  Not checked against
            the calendar.
        location: ``"Venue, City, State"`` string.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    main_artist: str = Field(alias="mainArtist", min_length=1)
    full_lineup: str = Field(default="", alias="fullLineup")
    date: str
    location: str = ""

    @field_validator("main_artist")
    @classmethod
    def _strip_main_artist(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("mainArtist must not be blank")
        return stripped

    @field_validator("full_lineup", "location", mode="before")
    @classmethod
    def _none_as_empty(cls, value: str | None) -> str:
        """The model occasionally answers ``null`` for unknown fields."""
        return "" if value is None else value
