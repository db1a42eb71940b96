"""
Project is a module that provides a way to manage Keptn projects.
"""

import base64

import click

from .util import (
    console,
    click_group,
    get_client,
)
from keptn.api.types.project import CreateProject


@click_group()
def project():
    """
    Manage Keptn projects.

    A project is the top level entity of Keptn. Its shipyard file defines the
    stages that each service of the project is delivered through, and its
    configuration is kept in a git repository that can be connected to an
    upstream remote.
    """
    pass


def _create_project_model(name, shipyard, git_user, git_token, git_remote_url):
    with open(shipyard, "rb") as f:
        encoded_shipyard = base64.b64encode(f.read()).decode("utf-8")
    return CreateProject(
        name=name,
        shipyard=encoded_shipyard,
        git_user=git_user,
        git_token=git_token,
        git_remote_url=git_remote_url,
    )


_git_options = [
    click.option("--git-user", help="User of the upstream git repository."),
    click.option("--git-token", help="Token of the upstream git repository."),
    click.option("--git-remote-url", help="Url of the upstream git repository."),
]


def _with_git_options(f):
    for option in reversed(_git_options):
        f = option(f)
    return f


@project.command()
@click.option("--name", "-n", help="Project name", required=True)
@click.option(
    "--shipyard",
    "-s",
    help="Path to the shipyard file of the project.",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
)
@_with_git_options
def create(name, shipyard, git_user, git_token, git_remote_url):
    """
    Creates a project from the given shipyard file.
    """
    client = get_client()
    client.project.create(
        _create_project_model(name, shipyard, git_user, git_token, git_remote_url)
    )
    console.print(f"Project [green]{name}[/] created successfully.")


@project.command()
@click.option("--name", "-n", help="Project name", required=True)
@click.option(
    "--shipyard",
    "-s",
    help="Path to the shipyard file of the project.",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
)
@_with_git_options
def update(name, shipyard, git_user, git_token, git_remote_url):
    """
    Updates the shipyard and the upstream repository of a project.
    """
    client = get_client()
    client.project.update(
        _create_project_model(name, shipyard, git_user, git_token, git_remote_url)
    )
    console.print(f"Project [green]{name}[/] updated successfully.")


@project.command()
@click.option("--name", "-n", help="Project name", required=True)
def delete(name):
    """
    Deletes the project with the given name, including all its stages and
    services.
    """
    client = get_client()
    response = client.project.delete(name)
    console.print(f"Project [green]{name}[/] deleted successfully.")
    if response is not None and response.message:
        console.print(response.message)


def add_command(cli_group):
    cli_group.add_command(project)
