"""Backend types and their display names."""

from enum import IntEnum

_UNKNOWN = "Unknown backend"


class BackendType(IntEnum):
    """Compute backends a transport can run on."""

    CPU = 0
    CUDA = 1
    HIP = 2


def backend_name(backend) -> str:
    """Return the qualified name of a backend, or 'Unknown backend'."""
    try:
        kind = BackendType(backend)
    except (ValueError, TypeError):
        return _UNKNOWN
    return f"BackendType::{kind.name}"