"""Custom exception hierarchy for process unit simulation."""

from procunits.core.enums import DeviceErrorKind


class ProcUnitsError(Exception):
    """Base exception for all procunits errors."""
    pass


class DeviceError(ProcUnitsError):
    """
    Base exception for device-related errors.

    Every device error carries a DeviceErrorKind so callers can discriminate
    programmatically instead of comparing message strings.

    Attributes:
        message: Literal diagnostic text (also returned by str())
        kind: Tag identifying the failure class
    """

    kind: DeviceErrorKind = DeviceErrorKind.UNSPECIFIED

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CapacityExceededError(DeviceError):
    """Raised when a stream is attached to an already full input/output slot set."""
    kind = DeviceErrorKind.CAPACITY_EXCEEDED


class EmptyOutputsError(DeviceError):
    """Raised when a mixer is updated with no output stream attached."""
    kind = DeviceErrorKind.EMPTY_OUTPUTS


class MissingInputError(DeviceError):
    """Raised when a reactor is updated with no input stream attached."""
    kind = DeviceErrorKind.MISSING_INPUT


class OutputCountMismatchError(DeviceError):
    """Raised when a reactor's attached outputs differ from its configured amount."""
    kind = DeviceErrorKind.OUTPUT_COUNT_MISMATCH


class RecycleDetectedError(DeviceError):
    """
    Raised when update_outputs() is called on an already calculated device.

    Attributes:
        device_type: Discriminator of the offending device ("Mixer", "Reactor")
        stream_name: Name of the device's first output stream
    """
    kind = DeviceErrorKind.RECYCLE_DETECTED

    def __init__(self, device_type: str, stream_name: str) -> None:
        super().__init__(
            f"Recycle detected: {device_type} already calculated "
            f"(output stream {stream_name})"
        )
        self.device_type = device_type
        self.stream_name = stream_name


class RegistryError(ProcUnitsError):
    """Base exception for registry errors."""
    pass


class DeviceNotFoundError(RegistryError):
    """Raised when device ID not found in registry."""
    pass


class DuplicateDeviceError(RegistryError):
    """Raised when attempting to register duplicate device ID."""
    pass


class ConfigurationError(ProcUnitsError):
    """Raised for configuration loading/validation errors."""
    pass
