"""
Records and state containers shared by the page components.

The rendering layer reads these as view models; only the components in
`portfolio` mutate them.
"""

from .models import (
    ContactFormState,
    Experience,
    FieldState,
    HeroTypingState,
    LoadPhase,
    LoadState,
    Project,
    RevealPhase,
)
from .observable import Observable

__all__ = [
    "ContactFormState",
    "Experience",
    "FieldState",
    "HeroTypingState",
    "LoadPhase",
    "LoadState",
    "Observable",
    "Project",
    "RevealPhase",
]
