"""
Type aliases for static type checking.
"""

from typing import Dict, Any, TypeAlias
import numpy as np
import numpy.typing as npt

# Scalar types
MassFlow: TypeAlias = float      # mass per unit time, caller-defined units

# Array types
MassFlowArray: TypeAlias = npt.NDArray[np.float64]

# State dictionary type
DeviceStateDict: TypeAlias = Dict[str, Any]
