"""Playground CLI commands.

Drives a headless editing session so schemas, forms and rendered markup can
be inspected without a browser.
"""

from __future__ import annotations

import rich_click as click
from rich.console import Console
from rich.table import Table

from playground_py.config import PlaygroundConfig
from playground_py.core.logging import configure_from
from playground_py.core.schema import COMMON_PROPERTIES, schema_for
from playground_py.core.types import ElementType
from playground_py.host.memory import InMemoryHost
from playground_py.services.session import PlaygroundSession

console = Console()

ELEMENT_TYPES = [element_type.value for element_type in ElementType]


def _parse_edits(edits: tuple[str, ...]) -> list[tuple[str, str]]:
    """Split ``name=value`` options into pairs."""
    pairs = []
    for edit in edits:
        name, sep, value = edit.partition("=")
        if not sep or not name:
            msg = f"Expected name=value, got {edit!r}"
            raise click.BadParameter(msg, param_hint="--set")
        pairs.append((name.strip(), value))
    return pairs


def _run_session(
    element_type: str, x: float, y: float, edits: tuple[str, ...]
) -> tuple[PlaygroundSession, InMemoryHost]:
    """Drop an element and apply each edit in order, printing the outcomes."""
    pairs = _parse_edits(edits)
    host = InMemoryHost()
    session = PlaygroundSession(host)
    session.on_drop(element_type, x, y)

    if pairs:
        table = Table(title="Edits")
        table.add_column("Property", style="cyan")
        table.add_column("Input", style="dim")
        table.add_column("Status", style="yellow")
        table.add_column("Value", style="green")
        for name, raw in pairs:
            result = session.on_field_change(name, raw)
            value = repr(result.value) if result.ok else result.message
            table.add_row(name, raw, result.status.value, value)
        console.print(table)
    return session, host


@click.group(name="playground", help="Inspect canvas element schemas, forms and rendered markup.")
@click.option("--debug/--no-debug", default=None, help="Enable debug logging")
def cli(debug: bool | None) -> None:
    """Inspect canvas element schemas, forms and rendered markup."""
    configure_from(PlaygroundConfig(), debug=debug)


@cli.command(name="schema", help="Show the property schema for one or all element types.")
@click.argument("element_type", required=False, type=click.Choice(ELEMENT_TYPES))
def show_schema(element_type: str | None) -> None:
    """Show the property schema for one or all element types."""
    types = [ElementType(element_type)] if element_type else list(ElementType)
    for current in types:
        table = Table(title=f"{current.value.title()} properties")
        table.add_column("Property", style="cyan")
        table.add_column("Kind", style="yellow")
        table.add_column("Control", style="magenta")
        table.add_column("Default", style="green")
        table.add_column("Constraints", style="dim")

        for descriptor in (*COMMON_PROPERTIES, *schema_for(current)):
            constraints = descriptor.constraints
            parts = []
            if constraints.minimum is not None:
                parts.append(f"min {constraints.minimum:g}")
            if constraints.maximum is not None:
                parts.append(f"max {constraints.maximum:g}")
            if constraints.integer:
                parts.append("integer")
            if constraints.choices:
                parts.append(", ".join(constraints.choices))
            table.add_row(
                descriptor.name,
                descriptor.value_kind.value,
                descriptor.control_kind.value,
                repr(descriptor.default),
                "; ".join(parts) or "-",
            )

        console.print(table)


@cli.command(name="form", help="Drop an element, apply edits and show the resulting form.")
@click.argument("element_type", type=click.Choice(ELEMENT_TYPES))
@click.option("--set", "-s", "edits", multiple=True, help="Edit to apply, as name=value")
@click.option("--x", default=0.0, type=float, help="Drop X-coordinate")
@click.option("--y", default=0.0, type=float, help="Drop Y-coordinate")
def show_form(element_type: str, edits: tuple[str, ...], x: float, y: float) -> None:
    """Drop an element, apply edits and show the resulting form."""
    session, _ = _run_session(element_type, x, y, edits)
    element = session.selected
    form = session.form
    if element is None or form is None:
        return

    table = Table(title=f"Form for {element.element_type.value} #{element.id}")
    table.add_column("Field", style="cyan")
    table.add_column("Label")
    table.add_column("Control", style="magenta")
    table.add_column("Value", style="green")
    for form_field in form.fields:
        table.add_row(
            form_field.property_name,
            form_field.label,
            form_field.control_kind.value,
            repr(form_field.current_value),
        )
    console.print(table)


@cli.command(name="render", help="Drop an element, apply edits and print the rendered HTML.")
@click.argument("element_type", type=click.Choice(ELEMENT_TYPES))
@click.option("--set", "-s", "edits", multiple=True, help="Edit to apply, as name=value")
@click.option("--x", default=0.0, type=float, help="Drop X-coordinate")
@click.option("--y", default=0.0, type=float, help="Drop Y-coordinate")
def render(element_type: str, edits: tuple[str, ...], x: float, y: float) -> None:
    """Drop an element, apply edits and print the rendered HTML."""
    _, host = _run_session(element_type, x, y, edits)
    for html in host.elements.values():
        click.echo(html)
    if host.form_html:
        click.echo(host.form_html)
