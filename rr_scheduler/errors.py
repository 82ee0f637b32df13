from __future__ import annotations


class SchedulerError(ValueError):
    """
    Base class for every error raised by the simulation engine.
    """


class EmptyInput(SchedulerError):
    """No processes were supplied."""


class InvalidQuantum(SchedulerError):
    """Round-robin quantum is missing, non-numeric or below 1."""


class InvalidRange(SchedulerError):
    """Quantum sweep bounds are malformed."""


class InvalidProcess(SchedulerError):
    """A process has a bad id, a negative arrival or a non-positive burst."""
