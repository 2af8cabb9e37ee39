"""Sweep calculation and orchestration."""

from treasury.core.sweep.calculator import calculate_sweep
from treasury.core.sweep.service import SweepResult, SweepService

__all__ = ["SweepResult", "SweepService", "calculate_sweep"]
