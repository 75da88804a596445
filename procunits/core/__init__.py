"""Core abstractions: streams, devices, registry, errors."""

from procunits.core.enums import DeviceErrorKind, DeviceState
from procunits.core.exceptions import (
    ProcUnitsError,
    DeviceError,
    CapacityExceededError,
    EmptyOutputsError,
    MissingInputError,
    OutputCountMismatchError,
    RecycleDetectedError,
    RegistryError,
    DeviceNotFoundError,
    DuplicateDeviceError,
    ConfigurationError,
)
from procunits.core.constants import MIXER_OUTPUTS, MASS_BALANCE_TOLERANCE
from procunits.core.stream import Stream, StreamCounter
from procunits.core.device import Device
from procunits.core.device_registry import DeviceRegistry
from procunits.core.balance import (
    mass_flows,
    total_mass_flow,
    mass_balance_error,
    is_mass_balanced,
    flows_close,
)
