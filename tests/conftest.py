"""
Pytest configuration and fixtures for procunits testing.

This file sets up common fixtures, test configuration, and hooks for pytest.
"""

import pytest

from procunits.core.stream import StreamCounter


def pytest_configure(config):
    """Configure pytest settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def counter():
    """Fresh stream counter; first stream is 's1'."""
    return StreamCounter()


@pytest.fixture
def flowsheet_dict():
    """Reactor feeding one inlet of a two-inlet mixer."""
    return {
        'name': 'reactor_mixer',
        'version': '1.0',
        'streams': [
            {'id': 'feed', 'mass_flow': 20.0},
            {'id': 'r1_out'},
            {'id': 'side', 'mass_flow': 5.0},
            {'id': 'product'},
        ],
        'devices': [
            {'id': 'r1', 'type': 'reactor', 'double': False},
            {'id': 'm1', 'type': 'mixer', 'inputs': 2},
        ],
        'connections': [
            {'stream': 'feed', 'device': 'r1', 'port': 'input'},
            {'stream': 'r1_out', 'device': 'r1', 'port': 'output'},
            {'stream': 'r1_out', 'device': 'm1', 'port': 'input'},
            {'stream': 'side', 'device': 'm1', 'port': 'input'},
            {'stream': 'product', 'device': 'm1', 'port': 'output'},
        ],
        'sequence': ['r1', 'm1'],
    }
