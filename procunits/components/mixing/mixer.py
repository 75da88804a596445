"""
Stream Mixer Component.

Combines a fixed number of input streams into a single output stream by
summing their mass flows.
"""

import logging

from procunits.core.constants import MIXER_OUTPUTS
from procunits.core.device import Device
from procunits.core.exceptions import CapacityExceededError, EmptyOutputsError
from procunits.core.stream import Stream

logger = logging.getLogger(__name__)


class Mixer(Device):
    """
    Merges N inlet streams into one outlet stream.

    Physics:
        - Mass Balance: m_out = sum(m_in_i) / n_outlets, with n_outlets == 1

    Capacity messages differ from the base Device wording
    ("Too much inputs" / "Too much outputs").

    Example:
        mixer = Mixer(2)
        mixer.add_input(s1)
        mixer.add_input(s2)
        mixer.add_output(s3)
        mixer.update_outputs()   # s3.mass_flow == s1.mass_flow + s2.mass_flow
    """

    device_type = "Mixer"

    def __init__(self, input_count: int, **kwargs) -> None:
        """
        Initialize the Mixer.

        Args:
            input_count: Number of inlet streams (positive integer)
            **kwargs: Forwarded to Device (device_id)

        Raises:
            ValueError: If input_count is not a positive integer
        """
        if isinstance(input_count, bool) or not isinstance(input_count, int) or input_count < 1:
            raise ValueError(f"Mixer: input_count must be a positive integer, got {input_count!r}")

        super().__init__(input_amount=input_count, output_amount=MIXER_OUTPUTS, **kwargs)
        self.input_count = input_count

    def add_input(self, stream: Stream) -> None:
        if len(self._inputs) >= self.input_count:
            raise CapacityExceededError("Too much inputs")
        self._inputs.append(stream)
        logger.debug(f"{self._label()}: attached input {stream.name}")

    def add_output(self, stream: Stream) -> None:
        if len(self._outputs) >= MIXER_OUTPUTS:
            raise CapacityExceededError("Too much outputs")
        self._outputs.append(stream)
        logger.debug(f"{self._label()}: attached output {stream.name}")

    def update_outputs(self) -> None:
        """
        Sum inlet flows and write the result to the outlet.

        Raises:
            RecycleDetectedError: If already calculated
            EmptyOutputsError: If no outlet stream is attached
        """
        super().update_outputs()

        if not self._outputs:
            raise EmptyOutputsError("Should set outputs before update")

        sum_mass_flow = 0.0
        for stream in self._inputs:
            sum_mass_flow += stream.mass_flow

        output_mass = sum_mass_flow / len(self._outputs)
        for stream in self._outputs:
            stream.set_mass_flow(output_mass)

        self.set_calculated(True)
        logger.debug(
            f"{self._label()}: mixed {len(self._inputs)} inlets -> {output_mass:g}"
        )
