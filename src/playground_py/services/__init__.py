"""Service layer for playground-py."""

from playground_py.services.render import RenderService
from playground_py.services.session import PlaygroundSession

__all__ = ["PlaygroundSession", "RenderService"]
