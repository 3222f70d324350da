"""Scheduled simulation events."""

from __future__ import annotations

from dataclasses import dataclass

from .clock import Moment
from .patient import Patient
from .state import State


@dataclass(frozen=True)
class Event:
    """A patient reaching ``state`` at ``time``."""

    patient: Patient
    time: Moment
    state: State