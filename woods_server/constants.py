"""Settings shared across the hub modules."""

HOST: str = "0.0.0.0"
PORT: int = 8765
DEFAULT_TOPIC: str = "woods"
KEEPALIVE_MESSAGE: str = "ping"
