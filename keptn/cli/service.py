"""
Service is a module that provides a way to manage the services of a project.
"""

import click

from .util import (
    console,
    click_group,
    get_client,
)
from keptn.api.types.service import CreateService


@click_group()
def service():
    """
    Manage the services of Keptn projects.

    A service is created in all stages of its project at once.
    """
    pass


@service.command()
@click.option("--project", "-p", help="Project name", required=True)
@click.option("--name", "-n", help="Service name", required=True)
def create(project, name):
    """
    Creates a service in the given project.
    """
    client = get_client()
    client.service.create(project, CreateService(service_name=name))
    console.print(
        f"Service [green]{name}[/] created successfully in project [green]{project}[/]."
    )


@service.command()
@click.option("--project", "-p", help="Project name", required=True)
@click.option("--name", "-n", help="Service name", required=True)
def delete(project, name):
    """
    Deletes a service from all stages of the given project.
    """
    client = get_client()
    response = client.service.delete(project, name)
    console.print(f"Service [green]{name}[/] deleted successfully.")
    if response is not None and response.message:
        console.print(response.message)


def add_command(cli_group):
    cli_group.add_command(service)
