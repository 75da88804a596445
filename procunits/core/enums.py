"""
Integer-based enumerations for device state and error tagging.

IntEnum keeps the tags cheap to compare and JSON-serializable via int().
"""

from enum import IntEnum


class DeviceErrorKind(IntEnum):
    """
    Tag carried by every DeviceError.

    Examples:
        try:
            mixer.add_input(stream)
        except DeviceError as err:
            if err.kind == DeviceErrorKind.CAPACITY_EXCEEDED:
                ...
    """
    UNSPECIFIED = 0
    CAPACITY_EXCEEDED = 1      # add_input/add_output on a full slot set
    EMPTY_OUTPUTS = 2          # Mixer updated with no outputs
    MISSING_INPUT = 3          # Reactor updated with no input
    OUTPUT_COUNT_MISMATCH = 4  # Reactor outputs != configured amount
    RECYCLE_DETECTED = 5       # update on an already calculated device


class DeviceState(IntEnum):
    """
    Calculation state of a device.

    FRESH devices may be updated; CALCULATED devices raise on update until
    the caller re-arms them with set_calculated(False).
    """
    FRESH = 0
    CALCULATED = 1
