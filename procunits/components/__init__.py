"""
Concrete device variants.

The set of device kinds is closed: DEVICE_TYPES is the only lookup used by
the configuration layer to turn a type name into a class.
"""

from typing import Dict, Type

from procunits.core.device import Device
from procunits.components.mixing import Mixer
from procunits.components.reaction import Reactor

DEVICE_TYPES: Dict[str, Type[Device]] = {
    'mixer': Mixer,
    'reactor': Reactor,
}

__all__ = ['Mixer', 'Reactor', 'DEVICE_TYPES']
