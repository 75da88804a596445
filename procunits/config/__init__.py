"""Declarative flowsheet configuration: models, loaders and builder."""

from procunits.config.flowsheet_config import (
    FlowsheetConfig,
    StreamConfig,
    DeviceConfig,
    ConnectionConfig,
)
from procunits.config.loaders import ConfigLoader, load_flowsheet_config
from procunits.config.flowsheet_builder import FlowsheetBuilder
