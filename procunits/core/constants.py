"""
Constants shared by streams, devices and mass-balance checks.
"""

from typing import Final

# Mixers always have exactly one outlet
MIXER_OUTPUTS: Final[int] = 1

# Absolute tolerance for mass-balance comparisons (same units as mass_flow)
MASS_BALANCE_TOLERANCE: Final[float] = 0.01

STREAM_NAME_PREFIX: Final[str] = "s"

REACTOR_INPUTS: Final[int] = 1
SINGLE_REACTOR_OUTPUTS: Final[int] = 1
DOUBLE_REACTOR_OUTPUTS: Final[int] = 2
