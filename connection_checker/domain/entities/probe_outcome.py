"""Probe outcome entity."""
from __future__ import annotations

from dataclasses import dataclass

from .probe_target import ProbeTarget


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of one completed connection attempt against ``target``."""

    target: ProbeTarget
    success: bool

    def to_dict(self) -> dict:
        return {
            **self.target.to_dict(),
            'success': self.success,
        }

    def __str__(self) -> str:
        return f"ProbeOutcome({self.target}, {self.success})"
