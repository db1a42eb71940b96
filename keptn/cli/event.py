"""
Event is a module to send events to Keptn and to look them up.
"""

import click

from rich.table import Table

from .util import (
    console,
    check,
    click_group,
    get_client,
)
from keptn.api.types.event import KeptnContextExtendedCE
from keptn.config import DEFAULT_EVENT_PAGE_SIZE


@click_group()
def event():
    """
    Send and retrieve Keptn events.

    Events are cloud events that describe what happens during a delivery, e.g.
    `sh.keptn.event.dev.delivery.triggered`. Events that belong to the same
    delivery share a keptn context.
    """
    pass


@event.command()
@click.option(
    "--file",
    "-f",
    "file_",
    help="Path to a json file holding the event.",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
)
def send(file_):
    """
    Sends the event in the given json file.
    """
    with open(file_, "rb") as f:
        ce = KeptnContextExtendedCE.model_validate_json(f.read())
    client = get_client()
    event_context = client.event.send(ce)
    check(event_context is not None, "[red]Keptn did not return an event context.[/]")
    console.print(
        "Event sent successfully. Keptn context:"
        f" [green]{event_context.keptn_context}[/]"
    )


@event.command(name="get")
@click.option("--keptn-context", "-c", help="The keptn context", required=True)
@click.option("--type", "-t", "type_", help="The event type", required=True)
@click.option(
    "--page-size",
    help="Maximum number of events to show.",
    type=int,
    default=DEFAULT_EVENT_PAGE_SIZE,
    show_default=True,
)
def get_command(keptn_context, type_, page_size):
    """
    Lists the events of the given type in the given keptn context.
    """
    client = get_client()
    events = client.event.get_events(keptn_context, type_, page_size=page_size)
    if events is None or not events.events:
        console.print(f"No events of type [yellow]{type_}[/] found.")
        return
    table = Table(title="Events", show_lines=True)
    table.add_column("ID")
    table.add_column("Type")
    table.add_column("Source")
    table.add_column("Time")
    for e in events.events:
        table.add_row(
            e.id_ or "",
            e.type_ or "",
            e.source or "",
            e.time.isoformat() if e.time else "",
        )
    console.print(table)


def add_command(cli_group):
    cli_group.add_command(event)
