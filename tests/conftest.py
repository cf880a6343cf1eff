"""Pytest configuration and fixtures for playground-py tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from playground_py.config import PlaygroundConfig
from playground_py.core.models import Canvas, Element, create_element
from playground_py.host.memory import InMemoryHost
from playground_py.services.render import RenderService
from playground_py.services.session import PlaygroundSession


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Restore the default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


# Model fixtures


@pytest.fixture
def text_element() -> Element:
    """Create a text element with schema defaults."""
    return create_element("text", 50, 80)


@pytest.fixture
def image_element() -> Element:
    """Create an image element with schema defaults."""
    return create_element("image", 10, 20)


@pytest.fixture
def shape_element() -> Element:
    """Create a shape element with schema defaults."""
    return create_element("shape", 0, 0)


@pytest.fixture
def canvas() -> Canvas:
    """Create an empty canvas."""
    return Canvas(name="Test Canvas", width=800, height=600)


# Host and session fixtures


@pytest.fixture
def renderer() -> RenderService:
    """Create a RenderService instance."""
    return RenderService()


@pytest.fixture
def host() -> InMemoryHost:
    """Create a fresh InMemoryHost for each test."""
    return InMemoryHost()


@pytest.fixture
def config() -> PlaygroundConfig:
    """Create a session configuration independent of the environment."""
    return PlaygroundConfig(canvas_width=800, canvas_height=600, contain_drag=True, debug=False, json_logs=False)


@pytest.fixture
def session(host: InMemoryHost, config: PlaygroundConfig) -> PlaygroundSession:
    """Create a session wired to the in-memory host."""
    return PlaygroundSession(host, config)
