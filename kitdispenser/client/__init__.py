# Client for remote dispensers
from kitdispenser.client.client import DispenserClient as DispenserClient
from kitdispenser.client.client import DispenserClientError as DispenserClientError

__all__ = ["DispenserClient", "DispenserClientError"]
