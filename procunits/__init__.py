"""
Process Units - Main Package

Minimal simulation of chemical process devices connected by mass-flow
streams:
- Stream / StreamCounter: named scalar mass-flow carriers
- Mixer: N inlets summed into one outlet
- Reactor: one inlet split evenly across one or two outlets
- Recycle guard: a calculated device refuses to recompute
- Declarative flowsheets loaded from YAML/JSON
"""

__version__ = "1.0.0"

from procunits.core import *
from procunits.components import Mixer, Reactor, DEVICE_TYPES
from procunits.config import (
    FlowsheetConfig,
    ConfigLoader,
    load_flowsheet_config,
    FlowsheetBuilder,
)

__all__ = [
    # Core
    'Stream',
    'StreamCounter',
    'Device',
    'DeviceRegistry',

    # Enums
    'DeviceErrorKind',
    'DeviceState',

    # Errors
    'ProcUnitsError',
    'DeviceError',
    'CapacityExceededError',
    'EmptyOutputsError',
    'MissingInputError',
    'OutputCountMismatchError',
    'RecycleDetectedError',
    'RegistryError',
    'DeviceNotFoundError',
    'DuplicateDeviceError',
    'ConfigurationError',

    # Constants
    'MIXER_OUTPUTS',
    'MASS_BALANCE_TOLERANCE',

    # Balance helpers
    'mass_flows',
    'total_mass_flow',
    'mass_balance_error',
    'is_mass_balanced',
    'flows_close',

    # Devices
    'Mixer',
    'Reactor',
    'DEVICE_TYPES',

    # Configuration
    'FlowsheetConfig',
    'ConfigLoader',
    'load_flowsheet_config',
    'FlowsheetBuilder',
]
