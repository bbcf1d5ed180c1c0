"""Scalar duration backends for compact duration aggregation and decomposition."""

from typing import Any

from compactdur._constants import DEFAULT_BACKEND
from compactdur.backend._base import BackendName, DurationBackend
from compactdur.backend.milliseconds import MillisecondsBackend
from compactdur.backend.timedelta import TimedeltaBackend

__all__ = [
    "BackendName",
    "DurationBackend",
    "MillisecondsBackend",
    "TimedeltaBackend",
    "backend_for",
    "get_backend",
]

_REGISTRY: dict[str, type[DurationBackend]] = {
    BackendName.TIMEDELTA: TimedeltaBackend,
    BackendName.MILLISECONDS: MillisecondsBackend,
}


def get_backend(name: str = DEFAULT_BACKEND) -> DurationBackend:
    """Get a backend instance by name.

    Args:
        name: Backend name ("timedelta" or "milliseconds").

    Returns:
        A DurationBackend instance.

    Raises:
        ValueError: If the backend name is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown backend: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls()


def backend_for(value: Any) -> DurationBackend | None:
    """Find the backend whose duration type matches ``value``."""
    for cls in _REGISTRY.values():
        backend = cls()
        if backend.accepts(value):
            return backend
    return None
