"""Settings shared by the client modules."""

TOPIC: str = "woods"
HUB_HOST: str = "127.0.0.1"
HUB_PORT: int = 8765

WINDOW_WIDTH: int = 1280
WINDOW_HEIGHT: int = 720
FRAME_RATE: int = 60

CREATE_Z: float = 0
CREATE_SCALE: tuple[float, float, float] = (10, 10, 10)

SHAPE_SIZE: int = 10
ASSETS_DIR: str = "assets"
