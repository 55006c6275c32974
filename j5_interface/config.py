from dataclasses import dataclass


@dataclass(frozen=True)
class J5Config:
    NODE_NAME: str = 'j5_interface'

    # topics on the J5 network, do not change these
    CMD_TOPIC: str = '/j5_cmd'
    STATUS_TOPIC: str = '/j5_status'

    DEFAULT_VELOCITY_CMD: float = 0.0   # m/s
    DEFAULT_TURN_RATE_CMD: float = 0.0  # rad/s

    LOOP_RATE: int = 10  # Hz

    # safety limits only, not the actual limits of the platform
    MAX_VELOCITY_CMD: float = 3.0
    MAX_TURN_RATE_CMD: float = 1.0

    # only the most recent message matters
    QUEUE_DEPTH: int = 1

    @property
    def period(self):
        return 1.0 / self.LOOP_RATE


DEFAULT_CONFIG = J5Config()
