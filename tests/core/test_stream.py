import math

import pytest
from procunits.core.stream import Stream, StreamCounter


def test_stream_named_from_number():
    """Test stream name is built from the given counter value."""
    stream = Stream(7)
    assert stream.get_name() == "s7"
    assert stream.get_mass_flow() == 0.0

def test_set_mass_flow_overwrites_without_validation():
    """Negative and NaN values are stored as given."""
    stream = Stream(1)
    stream.set_mass_flow(10.0)
    assert stream.get_mass_flow() == 10.0

    stream.set_mass_flow(-3.5)
    assert stream.get_mass_flow() == -3.5

    stream.set_mass_flow(float("nan"))
    assert math.isnan(stream.get_mass_flow())

def test_set_name():
    stream = Stream(1)
    stream.set_name("feed")
    assert stream.get_name() == "feed"

def test_describe():
    """Test human-readable summary."""
    stream = Stream(3)
    stream.set_mass_flow(15.0)
    assert stream.describe() == "Stream s3 flow = 15"
    assert str(stream) == stream.describe()


class TestStreamCounter:
    """Explicit counter replacing a global one."""

    def test_sequential_names(self, counter):
        names = [counter.new_stream().name for _ in range(3)]
        assert names == ["s1", "s2", "s3"]
        assert counter.value == 3

    def test_new_stream_sets_mass_flow(self, counter):
        stream = counter.new_stream(12.5)
        assert stream.mass_flow == 12.5

    def test_independent_counters(self):
        """Two counters never share state."""
        a = StreamCounter()
        b = StreamCounter()
        a.new_stream()
        a.new_stream()
        assert b.new_stream().name == "s1"

    def test_custom_start_and_reset(self):
        counter = StreamCounter(start=10)
        assert counter.next_value() == 11
        assert counter.next_value() == 12

        counter.reset()
        assert counter.value == 10
        assert counter.new_stream().name == "s11"

    def test_iteration_yields_new_streams(self, counter):
        s1, s2 = (stream for stream, _ in zip(counter, range(2)))
        assert (s1.name, s2.name) == ("s1", "s2")
        assert s1 is not s2
