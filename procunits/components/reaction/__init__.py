"""Reaction components that split an inlet across outlets."""

from procunits.components.reaction.reactor import Reactor

__all__ = ['Reactor']
