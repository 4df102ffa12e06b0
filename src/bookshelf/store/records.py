"""Pydantic models for stored records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AuthorRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class BookRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    author_id: int  # not checked against existing authors unless the store is strict
