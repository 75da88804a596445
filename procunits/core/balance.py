"""
Mass-balance checks over devices and stream collections.

Vectorized with NumPy so the same helpers serve single devices and whole
stream tables.
"""

from typing import Iterable

import numpy as np

from procunits.core.constants import MASS_BALANCE_TOLERANCE
from procunits.core.device import Device
from procunits.core.stream import Stream
from procunits.core.types import MassFlowArray


def mass_flows(streams: Iterable[Stream]) -> MassFlowArray:
    """Collect stream mass flows into a float64 array (attachment order kept)."""
    return np.fromiter((s.mass_flow for s in streams), dtype=np.float64)


def total_mass_flow(streams: Iterable[Stream]) -> float:
    return float(np.sum(mass_flows(streams)))


def mass_balance_error(device: Device) -> float:
    """
    Absolute difference between total inlet and total outlet flow.

    Args:
        device: Any device; need not be calculated

    Returns:
        |sum(inputs) - sum(outputs)|
    """
    m_in = total_mass_flow(device.get_inputs())
    m_out = total_mass_flow(device.get_outputs())
    return abs(m_in - m_out)


def is_mass_balanced(device: Device, tolerance: float = MASS_BALANCE_TOLERANCE) -> bool:
    return mass_balance_error(device) < tolerance


def flows_close(a: float, b: float, tolerance: float = MASS_BALANCE_TOLERANCE) -> bool:
    """Strict absolute-tolerance comparison of two flows."""
    return bool(np.abs(a - b) < tolerance)
