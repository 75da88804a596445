"""
Configuration dataclasses for declarative flowsheets.

Provides type-safe configuration structures using Python dataclasses, with
JSON Schema validation handled by the loader.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Literal

from procunits.components import DEVICE_TYPES


@dataclass
class StreamConfig:
    """A stream declared in the document, identified by a local label."""
    id: str
    mass_flow: float = 0.0

    def validate(self) -> None:
        if not self.id:
            raise ValueError("Stream id must be specified")


@dataclass
class DeviceConfig:
    """Configuration for a single device."""
    id: str
    type: str                     # key of DEVICE_TYPES ('mixer', 'reactor')
    inputs: Optional[int] = None  # mixer inlet count
    double: bool = False          # reactor with two outlets

    def validate(self) -> None:
        """Validate device configuration."""
        if not self.id:
            raise ValueError("Device id must be specified")
        if self.type not in DEVICE_TYPES:
            raise ValueError(
                f"Unknown device type '{self.type}' for '{self.id}', "
                f"expected one of {sorted(DEVICE_TYPES)}"
            )
        if self.type == 'mixer':
            if self.inputs is None or self.inputs < 1:
                raise ValueError(f"Mixer '{self.id}' needs a positive 'inputs' count")


@dataclass
class ConnectionConfig:
    """Attach a stream to one side of a device."""
    stream: str
    device: str
    port: Literal['input', 'output']

    def validate(self) -> None:
        """Validate connection configuration."""
        if not self.stream or not self.device:
            raise ValueError("Connection stream and device must be specified")
        if self.port not in ('input', 'output'):
            raise ValueError(f"Connection port must be 'input' or 'output', got '{self.port}'")


@dataclass
class FlowsheetConfig:
    """
    Complete flowsheet description.

    Attributes:
        name: Flowsheet label
        version: Document version string
        streams: Streams, created in list order (named s1, s2, ...)
        devices: Devices to build
        connections: Stream attachments, applied in list order
        sequence: Device ids in the order the caller wants them updated
    """
    name: str = "flowsheet"
    version: str = "1.0"
    streams: List[StreamConfig] = field(default_factory=list)
    devices: List[DeviceConfig] = field(default_factory=list)
    connections: List[ConnectionConfig] = field(default_factory=list)
    sequence: List[str] = field(default_factory=list)

    def validate(self) -> None:
        """
        Validate the whole document, including cross references.

        Raises:
            ValueError: On duplicate ids or dangling references
        """
        stream_ids = set()
        for s in self.streams:
            s.validate()
            if s.id in stream_ids:
                raise ValueError(f"Duplicate stream id '{s.id}'")
            stream_ids.add(s.id)

        device_ids = set()
        for d in self.devices:
            d.validate()
            if d.id in device_ids:
                raise ValueError(f"Duplicate device id '{d.id}'")
            device_ids.add(d.id)

        for c in self.connections:
            c.validate()
            if c.stream not in stream_ids:
                raise ValueError(f"Connection references unknown stream '{c.stream}'")
            if c.device not in device_ids:
                raise ValueError(f"Connection references unknown device '{c.device}'")

        for device_id in self.sequence:
            if device_id not in device_ids:
                raise ValueError(f"Sequence references unknown device '{device_id}'")
