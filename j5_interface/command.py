import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from j5_interface.config import DEFAULT_CONFIG, J5Config


@dataclass(frozen=True)
class VelocityCommand:
    """
    Velocity command sent to the J5.

    The type does not check limits itself; commands from build_command are
    always within the configured MAX_VELOCITY_CMD / MAX_TURN_RATE_CMD bounds.
    """
    linear_speed: float  # m/s, forward motion along body x
    angular_rate: float  # rad/s, rotation around body z


def parse_float(text) -> Optional[float]:
    """
    Parse a command line value, returning None when it is not usable.

    The whole string has to be a plain float literal, so "3.0abc" is rejected
    rather than read as 3.0. Digit-group underscores ("1_0") are rejected even
    though float() takes them. nan, inf, infinity and values that overflow to
    inf are rejected too.
    """
    if isinstance(text, str) and '_' in text:
        return None

    try:
        value = float(text)
    except (TypeError, ValueError, OverflowError):
        return None

    if not math.isfinite(value):
        return None
    return value


def clamp(value, limit):
    """Bound value to [-limit, limit]."""
    return float(np.clip(value, -limit, limit))


def _parse_arg(args, index, default, limit):
    if len(args) <= index:
        return default

    value = parse_float(args[index])
    if value is None:
        # could not parse the input, use default value
        return default
    return clamp(value, limit)


def build_command(args: Sequence[str], config: J5Config = DEFAULT_CONFIG) -> VelocityCommand:
    """
    Build the velocity command from the non-ROS command line arguments.

    args[0] is the program name, args[1] the linear velocity in m/s and
    args[2] the turn rate in rad/s. Missing or unparsable values fall back to
    the configured defaults; anything past args[2] is ignored.
    """
    linear_speed = _parse_arg(args, 1, config.DEFAULT_VELOCITY_CMD, config.MAX_VELOCITY_CMD)
    angular_rate = _parse_arg(args, 2, config.DEFAULT_TURN_RATE_CMD, config.MAX_TURN_RATE_CMD)
    return VelocityCommand(linear_speed, angular_rate)
