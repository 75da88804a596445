"""Tests for configuration-driven flowsheet assembly."""

from pathlib import Path

import pytest
import yaml
from procunits.components.mixing.mixer import Mixer
from procunits.components.reaction.reactor import Reactor
from procunits.config.flowsheet_builder import FlowsheetBuilder
from procunits.config.flowsheet_config import (
    ConnectionConfig,
    DeviceConfig,
    FlowsheetConfig,
    StreamConfig,
)
from procunits.config.loaders import ConfigLoader
from procunits.core.exceptions import (
    CapacityExceededError,
    ConfigurationError,
    RecycleDetectedError,
)


def _build(flowsheet_dict):
    return FlowsheetBuilder.from_config(ConfigLoader().load_dict(flowsheet_dict))


def test_streams_named_in_declaration_order(flowsheet_dict):
    flowsheet = _build(flowsheet_dict)

    assert [flowsheet.stream(sid).name for sid in ('feed', 'r1_out', 'side', 'product')] == [
        's1', 's2', 's3', 's4'
    ]
    assert flowsheet.stream('feed').mass_flow == 20.0
    assert flowsheet.counter.value == 4

def test_devices_registered_and_wired(flowsheet_dict):
    flowsheet = _build(flowsheet_dict)

    r1 = flowsheet.device('r1')
    m1 = flowsheet.device('m1')
    assert isinstance(r1, Reactor)
    assert isinstance(m1, Mixer)
    assert m1.input_amount == 2
    assert flowsheet.registry.get_by_type('reactor') == [r1]

    # Shared by reference
    assert r1.get_outputs()[0] is m1.get_inputs()[0]
    assert [s.name for s in m1.get_inputs()] == ['s2', 's3']

def test_matches_manual_wiring(flowsheet_dict):
    """Building from a document gives the same flows as wiring by hand."""
    flowsheet = _build(flowsheet_dict)

    updated = flowsheet.run()

    assert updated == ['r1', 'm1']
    assert flowsheet.stream('r1_out').mass_flow == pytest.approx(20.0)
    assert flowsheet.stream('product').mass_flow == pytest.approx(25.0)
    assert flowsheet.registry.get_calculated_ids() == ['r1', 'm1']

def test_run_honors_declared_order(flowsheet_dict):
    flowsheet_dict['sequence'] = ['m1', 'r1']
    flowsheet = _build(flowsheet_dict)

    flowsheet.run()

    # Mixer ran before the reactor produced its outlet flow
    assert flowsheet.stream('product').mass_flow == pytest.approx(5.0)

def test_second_run_raises_recycle(flowsheet_dict):
    flowsheet = _build(flowsheet_dict)
    flowsheet.run()

    with pytest.raises(RecycleDetectedError):
        flowsheet.run()

def test_capacity_error_propagates(flowsheet_dict):
    flowsheet_dict['streams'].append({'id': 'extra'})
    flowsheet_dict['connections'].append({'stream': 'extra', 'device': 'm1', 'port': 'input'})
    config = ConfigLoader().load_dict(flowsheet_dict)

    with pytest.raises(CapacityExceededError, match="Too much inputs"):
        FlowsheetBuilder.from_config(config)

def test_from_file(tmp_path, flowsheet_dict):
    path = tmp_path / "flowsheet.yml"
    path.write_text(yaml.safe_dump(flowsheet_dict), encoding='utf-8')

    flowsheet = FlowsheetBuilder.from_file(path)
    flowsheet.run()

    assert flowsheet.stream('product').mass_flow == pytest.approx(25.0)

def test_unknown_stream_lookup(flowsheet_dict):
    flowsheet = _build(flowsheet_dict)
    with pytest.raises(ConfigurationError, match="Unknown stream"):
        flowsheet.stream('ghost')

def test_bundled_example():
    example = Path(__file__).parents[2] / "examples" / "reactor_mixer.yaml"

    flowsheet = FlowsheetBuilder.from_file(example)
    flowsheet.run()

    assert flowsheet.stream('product').mass_flow == pytest.approx(25.0)


class TestHandBuiltConfig:
    """from_config() validates configs that never went through the loader."""

    def test_mixer_without_inputs(self):
        config = FlowsheetConfig(devices=[DeviceConfig(id="m", type="mixer")])

        with pytest.raises(ConfigurationError, match="positive 'inputs'"):
            FlowsheetBuilder.from_config(config)

    def test_unknown_device_type(self):
        config = FlowsheetConfig(devices=[DeviceConfig(id="d", type="distillation")])

        with pytest.raises(ConfigurationError, match="Unknown device type"):
            FlowsheetBuilder.from_config(config)

    def test_dangling_device_reference(self):
        config = FlowsheetConfig(
            streams=[StreamConfig(id="feed", mass_flow=1.0)],
            devices=[DeviceConfig(id="r1", type="reactor")],
            connections=[ConnectionConfig(stream="feed", device="ghost", port="input")],
        )

        with pytest.raises(ConfigurationError, match="unknown device 'ghost'"):
            FlowsheetBuilder.from_config(config)

    def test_dangling_stream_reference(self):
        config = FlowsheetConfig(
            devices=[DeviceConfig(id="r1", type="reactor")],
            connections=[ConnectionConfig(stream="ghost", device="r1", port="input")],
        )

        with pytest.raises(ConfigurationError, match="unknown stream 'ghost'"):
            FlowsheetBuilder.from_config(config)

    def test_valid_config_builds(self):
        config = FlowsheetConfig(
            streams=[StreamConfig(id="feed", mass_flow=6.0), StreamConfig(id="out")],
            devices=[DeviceConfig(id="r1", type="reactor")],
            connections=[
                ConnectionConfig(stream="feed", device="r1", port="input"),
                ConnectionConfig(stream="out", device="r1", port="output"),
            ],
            sequence=["r1"],
        )

        flowsheet = FlowsheetBuilder.from_config(config)
        flowsheet.run()

        assert flowsheet.stream("out").mass_flow == pytest.approx(6.0)
