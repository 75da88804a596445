"""Mixing components for combining multiple streams."""

from procunits.components.mixing.mixer import Mixer

__all__ = ['Mixer']
