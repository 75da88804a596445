"""
Reactor/Splitter Component.

Takes a single input stream and divides its mass flow evenly across one
(single reactor) or two (double reactor) output streams.
"""

import logging

from procunits.core.constants import (
    REACTOR_INPUTS,
    SINGLE_REACTOR_OUTPUTS,
    DOUBLE_REACTOR_OUTPUTS,
)
from procunits.core.device import Device
from procunits.core.exceptions import MissingInputError, OutputCountMismatchError

logger = logging.getLogger(__name__)


class Reactor(Device):
    """
    Splits one inlet stream evenly across its outlets.

    Physics:
        - Mass Balance: m_in = sum(m_out_i)
        - Each outlet receives m_in / output_amount

    Configuration:
        is_double (bool): Two outlets when True, one otherwise.

    Unlike the Mixer, capacity errors use the base Device wording
    ("INPUT STREAM LIMIT!" / "OUTPUT STREAM LIMIT!").
    """

    device_type = "Reactor"

    def __init__(self, is_double: bool = False, **kwargs) -> None:
        output_amount = DOUBLE_REACTOR_OUTPUTS if is_double else SINGLE_REACTOR_OUTPUTS
        super().__init__(input_amount=REACTOR_INPUTS, output_amount=output_amount, **kwargs)
        self.is_double = bool(is_double)

    def update_outputs(self) -> None:
        """
        Split the inlet flow across all outlets.

        Raises:
            RecycleDetectedError: If already calculated
            MissingInputError: If no inlet stream is attached
            OutputCountMismatchError: If attached outlets != output_amount
        """
        super().update_outputs()

        if not self._inputs:
            raise MissingInputError("No input stream")
        if len(self._outputs) != self.output_amount:
            raise OutputCountMismatchError("Wrong number of outputs")

        input_mass = self._inputs[0].mass_flow
        output_local = input_mass / self.output_amount
        for stream in self._outputs:
            stream.set_mass_flow(output_local)

        self.set_calculated(True)
        logger.debug(
            f"{self._label()}: split {input_mass:g} into "
            f"{self.output_amount} x {output_local:g}"
        )
