"""
Core device abstraction for process unit simulation.

This module defines the Device abstract base class shared by the Mixer and
Reactor variants. A Device holds bounded, ordered collections of shared
Stream references and a "calculated" flag that guards against recomputing
its outputs (recycle detection).
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
import logging

from procunits.core.enums import DeviceState
from procunits.core.exceptions import CapacityExceededError, RecycleDetectedError
from procunits.core.stream import Stream
from procunits.core.types import DeviceStateDict

logger = logging.getLogger(__name__)


class Device(ABC):
    """
    Abstract base class for all process devices.

    Each device follows the same lifecycle:

    1. add_input()/add_output(): attach streams one at a time, in order
    2. update_outputs(): read input flows and write output flows in place
    3. is_calculated(): True after the first successful update

    A second update_outputs() on a calculated device raises
    RecycleDetectedError. The only way back to the fresh state is an
    explicit set_calculated(False) by the caller.

    Attributes:
        device_id: Identifier set during registry registration (optional)
        input_amount: Maximum number of inputs (0 means unbounded)
        output_amount: Maximum number of outputs (0 means unbounded)
        calculated: Whether outputs have been computed
    """

    device_type: str = "Device"

    def __init__(self, input_amount: int = 0, output_amount: int = 0, **kwargs) -> None:
        """
        Initialize device with empty stream slots.

        Args:
            input_amount: Input capacity bound, fixed for the device lifetime
            output_amount: Output capacity bound, fixed for the device lifetime
            **kwargs:
                - device_id: Optional explicit ID (for tests/manual wiring)
        """
        device_id = kwargs.pop("device_id", None)
        if kwargs:
            raise TypeError(
                f"{type(self).__name__}: unexpected keyword arguments {sorted(kwargs)}"
            )

        self.device_id: Optional[str] = None
        self.input_amount: int = input_amount
        self.output_amount: int = output_amount
        self.calculated: bool = False
        self._inputs: List[Stream] = []
        self._outputs: List[Stream] = []

        if device_id is not None:
            self.set_device_id(device_id)

    def set_device_id(self, device_id: str) -> None:
        """
        Set unique device identifier (called by DeviceRegistry).

        Args:
            device_id: Unique identifier for registry lookup
        """
        self.device_id = device_id

    def get_device_type(self) -> str:
        """Fixed discriminator string, used for diagnostics only."""
        return self.device_type

    def add_input(self, stream: Stream) -> None:
        """
        Attach an input stream at the end of the input sequence.

        Args:
            stream: Shared stream reference (duplicates are not rejected)

        Raises:
            CapacityExceededError: If the input capacity is already reached
        """
        if self.input_amount > 0 and len(self._inputs) >= self.input_amount:
            raise CapacityExceededError("INPUT STREAM LIMIT!")
        self._inputs.append(stream)
        logger.debug(f"{self._label()}: attached input {stream.name}")

    def add_output(self, stream: Stream) -> None:
        """
        Attach an output stream at the end of the output sequence.

        Raises:
            CapacityExceededError: If the output capacity is already reached
        """
        if self.output_amount > 0 and len(self._outputs) >= self.output_amount:
            raise CapacityExceededError("OUTPUT STREAM LIMIT!")
        self._outputs.append(stream)
        logger.debug(f"{self._label()}: attached output {stream.name}")

    def get_inputs(self) -> Tuple[Stream, ...]:
        """Read-only view of input streams in attachment order."""
        return tuple(self._inputs)

    def get_outputs(self) -> Tuple[Stream, ...]:
        """Read-only view of output streams in attachment order."""
        return tuple(self._outputs)

    def get_input_count(self) -> int:
        return len(self._inputs)

    def get_output_count(self) -> int:
        return len(self._outputs)

    def is_calculated(self) -> bool:
        return self.calculated

    def set_calculated(self, calculated: bool) -> None:
        """
        Force the calculated flag.

        Passing False re-arms a calculated device so that update_outputs()
        may run again. Nothing in the package calls this on its own.
        """
        if self.calculated and not calculated:
            logger.warning(f"{self._label()}: re-armed after calculation")
        self.calculated = calculated

    @property
    def state(self) -> DeviceState:
        return DeviceState.CALCULATED if self.calculated else DeviceState.FRESH

    def check_for_recycle(self) -> None:
        """
        Refuse to recompute an already calculated device.

        Only the first output stream is reported even when several exist.

        Raises:
            RecycleDetectedError: If calculated and at least one output exists
        """
        for stream in self._outputs:
            if self.calculated:
                logger.warning(
                    f"{self._label()}: recycle detected at stream {stream.name}"
                )
                raise RecycleDetectedError(self.get_device_type(), stream.name)

    @abstractmethod
    def update_outputs(self) -> None:
        """
        Compute output stream flows from input stream flows.

        Concrete devices must call super().update_outputs() first, so the
        recycle check runs before any output is written, then validate their
        own preconditions, write outputs and finally set_calculated(True).
        A failing precondition leaves the calculated flag untouched.

        Raises:
            RecycleDetectedError: If the device was already calculated

        Example:
            def update_outputs(self) -> None:
                super().update_outputs()
                # ... arithmetic ...
                self.set_calculated(True)
        """
        self.check_for_recycle()

    def get_state(self) -> DeviceStateDict:
        """
        Return current device state for monitoring.

        Returns:
            JSON-serializable dictionary of the device and its stream flows.
        """
        return {
            "device_id": self.device_id,
            "device_type": self.get_device_type(),
            "calculated": self.calculated,
            "inputs": [
                {"name": s.name, "mass_flow": float(s.mass_flow)} for s in self._inputs
            ],
            "outputs": [
                {"name": s.name, "mass_flow": float(s.mass_flow)} for s in self._outputs
            ],
        }

    def _label(self) -> str:
        return self.device_id or self.get_device_type()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(device_id={self.device_id!r}, "
            f"inputs={self.get_input_count()}/{self.input_amount}, "
            f"outputs={self.get_output_count()}/{self.output_amount}, "
            f"calculated={self.calculated})"
        )
