# Dev kit dispenser

from kitdispenser.client import DispenserClient, DispenserClientError
from kitdispenser.common.exceptions import (
    BuildFailed,
    DispenserError,
    InvalidInput,
    NotFound,
    PoolExhausted,
    ReleaseFailed,
    ReservationFailed,
)

__all__ = [
    "BuildFailed",
    "DispenserClient",
    "DispenserClientError",
    "DispenserError",
    "InvalidInput",
    "NotFound",
    "PoolExhausted",
    "ReleaseFailed",
    "ReservationFailed",
]
