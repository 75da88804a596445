"""
Device registry for lookup and state aggregation.

The DeviceRegistry catalogs the devices of a flowsheet, providing:
- Device registration and lookup by ID or type tag
- State aggregation for monitoring

The registry never updates devices on its own: calling update_outputs() in
a sensible order remains the caller's job.
"""

from typing import Dict, Iterator, List, Optional, Any
from collections import defaultdict
import logging

from procunits.core.device import Device
from procunits.core.exceptions import DuplicateDeviceError, DeviceNotFoundError

logger = logging.getLogger(__name__)


class DeviceRegistry:
    """
    Central registry for device management.

    Example:
        registry = DeviceRegistry()

        registry.register("r1", Reactor(is_double=False))
        registry.register("m1", Mixer(2))

        reactors = registry.get_by_type("Reactor")
        state = registry.get_all_states()
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._devices: Dict[str, Device] = {}
        self._devices_by_type: Dict[str, List[Device]] = defaultdict(list)

    def register(
        self,
        device_id: str,
        device: Device,
        device_type: Optional[str] = None
    ) -> None:
        """
        Register a device in the registry.

        Args:
            device_id: Unique identifier for device lookup
            device: Device instance to register
            device_type: Optional type tag for filtering; defaults to
                         device.get_device_type()

        Raises:
            DuplicateDeviceError: If device_id already registered
            TypeError: If device doesn't inherit from Device
        """
        if device_id in self._devices:
            raise DuplicateDeviceError(f"Device ID '{device_id}' already registered")

        if not isinstance(device, Device):
            raise TypeError(
                f"Device must inherit from Device ABC, got {type(device)}"
            )

        device.set_device_id(device_id)
        self._devices[device_id] = device

        type_tag = device_type or device.get_device_type()
        self._devices_by_type[type_tag].append(device)

        logger.debug(f"Registered device '{device_id}' (type: {type_tag})")

    def get(self, device_id: str) -> Device:
        """
        Retrieve device by ID.

        Raises:
            DeviceNotFoundError: If device_id not found
        """
        if device_id not in self._devices:
            raise DeviceNotFoundError(
                f"Device '{device_id}' not found in registry. "
                f"Available: {list(self._devices.keys())}"
            )
        return self._devices[device_id]

    def get_by_type(self, device_type: str) -> List[Device]:
        """
        Retrieve all devices of a specific type tag.

        Returns:
            List of devices with matching tag (empty if none found)
        """
        return list(self._devices_by_type.get(device_type, []))

    def has(self, device_id: str) -> bool:
        return device_id in self._devices

    def get_all_states(self) -> Dict[str, Dict[str, Any]]:
        """
        Aggregate state from all devices.

        Example:
            state = registry.get_all_states()
            # {
            #   "r1": {"device_type": "Reactor", "calculated": True, ...},
            #   "m1": {"device_type": "Mixer", "calculated": False, ...}
            # }
        """
        return {
            device_id: device.get_state()
            for device_id, device in self._devices.items()
        }

    def get_calculated_ids(self) -> List[str]:
        """Return IDs of devices whose outputs are already computed."""
        return [
            device_id for device_id, device in self._devices.items()
            if device.is_calculated()
        ]

    def list_ids(self) -> List[str]:
        """Return registered device IDs in registration order."""
        return list(self._devices.keys())

    def get_types(self) -> List[str]:
        return list(self._devices_by_type.keys())

    def __contains__(self, device_id: object) -> bool:
        return device_id in self._devices

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._devices.keys()))
