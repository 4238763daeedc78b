"""Render instructions produced by the lightweight markup parser."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class Span(BaseModel):
    """A run of inline text, optionally emphasized."""

    model_config = ConfigDict(frozen=True)

    text: str
    emphasized: bool = False


class Heading(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["heading"] = "heading"
    level: int
    text: str


class ListItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["list_item"] = "list_item"
    ordered: bool = False
    spans: list[Span] = Field(default_factory=list)


class Paragraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["paragraph"] = "paragraph"
    spans: list[Span] = Field(default_factory=list)


class Spacer(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["spacer"] = "spacer"


Block = Annotated[Heading | ListItem | Paragraph | Spacer, Field(discriminator="type")]
