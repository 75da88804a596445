"""
FlowsheetBuilder: Factory for configuration-driven flowsheet assembly.

Creates streams and devices from a FlowsheetConfig, registers the devices
and wires streams to them in declaration order.
"""

from pathlib import Path
from typing import Dict, List
import logging

from procunits.components import DEVICE_TYPES
from procunits.config.flowsheet_config import FlowsheetConfig, DeviceConfig
from procunits.config.loaders import load_flowsheet_config
from procunits.core.device import Device
from procunits.core.device_registry import DeviceRegistry
from procunits.core.exceptions import ConfigurationError
from procunits.core.stream import Stream, StreamCounter

logger = logging.getLogger(__name__)


class FlowsheetBuilder:
    """
    Factory for building flowsheets from configuration.

    Example:
        # From configuration file
        flowsheet = FlowsheetBuilder.from_file("flowsheets/reactor_mixer.yaml")
        flowsheet.run()
        product = flowsheet.stream("product").mass_flow

        # From FlowsheetConfig object
        config = FlowsheetConfig(...)
        flowsheet = FlowsheetBuilder.from_config(config)
    """

    def __init__(self, config: FlowsheetConfig):
        """
        Initialize FlowsheetBuilder.

        Args:
            config: Validated FlowsheetConfig instance
        """
        self.config = config
        self.registry = DeviceRegistry()
        self.counter = StreamCounter()
        self.streams: Dict[str, Stream] = {}

    @classmethod
    def from_file(cls, config_path: Path | str) -> 'FlowsheetBuilder':
        """
        Build flowsheet from configuration file.

        Args:
            config_path: Path to YAML or JSON configuration
        """
        config = load_flowsheet_config(config_path)
        return cls.from_config(config)

    @classmethod
    def from_config(cls, config: FlowsheetConfig) -> 'FlowsheetBuilder':
        """Build flowsheet from an already loaded FlowsheetConfig."""
        builder = cls(config)
        builder.build()
        return builder

    def build(self) -> None:
        """
        Validate the configuration, create all streams and devices, then
        apply connections.

        Raises:
            ConfigurationError: If the configuration is inconsistent
            CapacityExceededError: Propagated unchanged from the devices
        """
        logger.info(f"Building flowsheet: {self.config.name}")

        try:
            self.config.validate()
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        self._build_streams()
        self._build_devices()
        self._apply_connections()

        logger.info(
            f"Flowsheet built: {len(self.streams)} streams, "
            f"{len(self.registry)} devices"
        )

    def _build_streams(self) -> None:
        for stream_cfg in self.config.streams:
            self.streams[stream_cfg.id] = self.counter.new_stream(stream_cfg.mass_flow)

    def _build_devices(self) -> None:
        for device_cfg in self.config.devices:
            self.registry.register(
                device_cfg.id, self._create_device(device_cfg), device_type=device_cfg.type
            )

    def _create_device(self, device_cfg: DeviceConfig) -> Device:
        device_cls = DEVICE_TYPES[device_cfg.type]
        if device_cfg.type == 'mixer':
            return device_cls(device_cfg.inputs)
        return device_cls(is_double=device_cfg.double)

    def _apply_connections(self) -> None:
        for conn in self.config.connections:
            stream = self.stream(conn.stream)
            device = self.device(conn.device)
            if conn.port == 'input':
                device.add_input(stream)
            else:
                device.add_output(stream)

    def stream(self, stream_id: str) -> Stream:
        """Look up a stream by its document id."""
        if stream_id not in self.streams:
            raise ConfigurationError(f"Unknown stream '{stream_id}'")
        return self.streams[stream_id]

    def device(self, device_id: str) -> Device:
        """Look up a device by its document id."""
        return self.registry.get(device_id)

    def run(self) -> List[str]:
        """
        Update devices in the declared sequence.

        The order is taken verbatim from the configuration; no dependency
        analysis is performed and errors are not caught.

        Returns:
            Device ids that were updated, in order
        """
        logger.info(f"Running sequence: {' -> '.join(self.config.sequence)}")
        updated = []
        for device_id in self.config.sequence:
            self.device(device_id).update_outputs()
            updated.append(device_id)
        return updated
