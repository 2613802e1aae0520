from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")


class Project(BaseModel):
    """
    A portfolio project as served by `data/projects.json`.

    Notes
    - JSON keys are camelCase (`shortDescription`); attributes are snake_case.
    - `date` is kept as the raw string; display formatting happens at render time.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    date: str = Field(..., description="ISO-ish date string, shown as written if unparseable")
    image: str
    short_description: str = Field(..., alias="shortDescription")
    long_description: str = Field(..., alias="longDescription")
    tags: Optional[List[str]] = None


class Experience(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    short_description: str = Field(..., alias="shortDescription")
    long_description: str = Field(..., alias="longDescription")
    image: Optional[str] = None


# --------------- Resource loading ---------------
class LoadPhase(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadState(Generic[T]):
    """Tri-state result of a resource load. Items are only set when loaded."""

    phase: LoadPhase = LoadPhase.LOADING
    items: Tuple[T, ...] = ()

    @classmethod
    def loading(cls) -> "LoadState[T]":
        return cls(phase=LoadPhase.LOADING)

    @classmethod
    def loaded(cls, items: Iterable[T]) -> "LoadState[T]":
        return cls(phase=LoadPhase.LOADED, items=tuple(items))

    @classmethod
    def failed(cls) -> "LoadState[T]":
        return cls(phase=LoadPhase.FAILED)

    @property
    def is_loading(self) -> bool:
        return self.phase is LoadPhase.LOADING

    @property
    def is_loaded(self) -> bool:
        return self.phase is LoadPhase.LOADED

    @property
    def has_failed(self) -> bool:
        return self.phase is LoadPhase.FAILED


# --------------- Scroll reveal ---------------
class RevealPhase(str, Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"


# --------------- Contact form ---------------
@dataclass(frozen=True)
class FieldState:
    """
    One contact form field.

    - `errors` holds the failing rule codes for `value` (empty when valid).
    - `touched` gates whether the rendering layer shows those errors.
    """

    value: str = ""
    touched: bool = False
    errors: Tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def show_errors(self) -> bool:
        return self.touched and not self.valid


@dataclass(frozen=True)
class ContactFormState:
    name: FieldState = FieldState()
    email: FieldState = FieldState()
    message: FieldState = FieldState()
    status_message: str = ""

    @property
    def fields(self) -> Tuple[Tuple[str, FieldState], ...]:
        return (("name", self.name), ("email", self.email), ("message", self.message))

    @property
    def form_valid(self) -> bool:
        return all(f.valid for _, f in self.fields)


# --------------- Hero typing ---------------
@dataclass(frozen=True)
class HeroTypingState:
    full_text: str
    cursor_index: int = 0

    @property
    def displayed_text(self) -> str:
        return self.full_text[: self.cursor_index]

    @property
    def is_complete(self) -> bool:
        return self.cursor_index >= len(self.full_text)

    def advance(self) -> "HeroTypingState":
        if self.is_complete:
            return self
        return replace(self, cursor_index=self.cursor_index + 1)


__all__ = [
    "ContactFormState",
    "Experience",
    "FieldState",
    "HeroTypingState",
    "LoadPhase",
    "LoadState",
    "Project",
    "RevealPhase",
]
