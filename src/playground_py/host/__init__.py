"""Render host layer for playground-py."""

from playground_py.host.base import RenderHost
from playground_py.host.memory import InMemoryHost, RenderCall

__all__ = ["InMemoryHost", "RenderCall", "RenderHost"]
