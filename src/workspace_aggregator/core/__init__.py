"""Run orchestration."""

from .pipeline import RunResult, run
from .progress import ProgressReporter, SilentReporter

__all__ = ["run", "RunResult", "ProgressReporter", "SilentReporter"]
