"""
Stream class for mass-flow tracking between devices.

A Stream is a named carrier of a single scalar mass flow. Streams are shared
by reference: the same object may be the output of one device and the input
of another, with neither device owning it.
"""

import itertools
from typing import Iterator

from procunits.core.constants import STREAM_NAME_PREFIX
from procunits.core.types import MassFlow


class Stream:
    """
    Represents a material flow with a name and a mass flow rate.

    Attributes:
        name: Stream label, "s<N>" where N is the number given at creation
        mass_flow: Mass flow rate (no unit conversion is performed)

    Example:
        feed = Stream(1)
        feed.set_mass_flow(10.0)
        feed.get_name()  # 's1'
    """

    def __init__(self, number: int) -> None:
        """
        Create a stream named after an explicit counter value.

        Args:
            number: Integer used to build the unique name "s<number>"
        """
        self.mass_flow: MassFlow = 0.0
        self.name: str = ""
        self.set_name(f"{STREAM_NAME_PREFIX}{number}")

    def set_name(self, name: str) -> None:
        self.name = name

    def get_name(self) -> str:
        return self.name

    def set_mass_flow(self, value: MassFlow) -> None:
        """
        Overwrite the mass flow.

        No validation is done here: negative or NaN values are accepted and
        are the caller's responsibility.
        """
        self.mass_flow = value

    def get_mass_flow(self) -> MassFlow:
        return self.mass_flow

    def describe(self) -> str:
        """Human-readable one-line summary."""
        return f"Stream {self.name} flow = {self.mass_flow:g}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Stream(name={self.name!r}, mass_flow={self.mass_flow!r})"


class StreamCounter:
    """
    Explicit source of stream numbers.

    Replaces a process-wide counter: whoever builds a flowsheet owns one
    counter and draws stream names from it.

    Example:
        counter = StreamCounter()
        s1 = counter.new_stream(10.0)   # named 's1'
        s2 = counter.new_stream()       # named 's2', mass_flow 0.0
    """

    def __init__(self, start: int = 0) -> None:
        self.start = start
        self._counter: Iterator[int] = itertools.count(start + 1)
        self.value: int = start

    def next_value(self) -> int:
        """Advance the counter and return the new value."""
        self.value = next(self._counter)
        return self.value

    def new_stream(self, mass_flow: MassFlow = 0.0) -> Stream:
        """Create a stream numbered by the next counter value."""
        stream = Stream(self.next_value())
        stream.set_mass_flow(mass_flow)
        return stream

    def reset(self) -> None:
        """Rewind to the starting value."""
        self._counter = itertools.count(self.start + 1)
        self.value = self.start

    def __iter__(self) -> Iterator[Stream]:
        while True:
            yield self.new_stream()
