import click

from rich.table import Table

from .util import console, get_client


@click.command()
def metadata():
    """
    Shows version information about the Keptn installation.
    """
    client = get_client()
    info = client.metadata.get()
    if info is None:
        console.print("Keptn returned no metadata.")
        return
    table = Table(title="Keptn", show_header=False)
    table.add_column("Key")
    table.add_column("Value")
    for key, value in info.model_dump(exclude_none=True).items():
        table.add_row(key, str(value))
    console.print(table)


def add_command(cli_group):
    cli_group.add_command(metadata)
