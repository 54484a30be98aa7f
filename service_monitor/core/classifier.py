"""Mapping from probe outcomes to endpoint statuses."""

from service_monitor.ports.endpoint import Error, Failure, ProbeOutcome, Status, Success

__all__ = ["classify"]


def classify(outcome: ProbeOutcome) -> Status:
    """Classify a probe outcome.

    Args:
        outcome: Result of a single probe.

    Returns:
        ACTIVE for Success, INACTIVE for Failure, UNKNOWN for Error.

    Raises:
        TypeError: If outcome is not a ProbeOutcome.
    """
    if isinstance(outcome, Success):
        return Status.ACTIVE
    if isinstance(outcome, Failure):
        return Status.INACTIVE
    if isinstance(outcome, Error):
        return Status.UNKNOWN
    raise TypeError(f"Not a probe outcome: {outcome!r}")
