import click

import keptn
from keptn.api.handler import APIHandler
from . import evaluation
from . import event
from . import metadata
from . import project
from . import service

from .util import click_group, set_client_options

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.version_option(keptn.__version__, "-v", "--version")
@click_group(context_settings=CONTEXT_SETTINGS)
@click.option("--url", help="Keptn api url. Defaults to KEPTN_API_URL.")
@click.option("--token", help="Keptn api token. Defaults to KEPTN_API_TOKEN.")
@click.option(
    "--auth-header",
    help="Header carrying the api token. Defaults to KEPTN_AUTH_HEADER or x-token.",
)
@click.option(
    "--scheme",
    type=click.Choice(["http", "https"]),
    help="Scheme of the api. Defaults to KEPTN_SCHEME, or the scheme of the url.",
)
def keptn_cli(url, token, auth_header, scheme):
    """
    keptn is the commandline interface of the Keptn python client. It manages
    projects and services, sends events and triggers evaluations on a Keptn
    installation. Point it to your installation with --url and --token, or the
    KEPTN_API_URL and KEPTN_API_TOKEN environment variables.
    """
    set_client_options(
        base_url=url, auth_token=token, auth_header=auth_header, scheme=scheme
    )


# Add subcommands
evaluation.add_command(keptn_cli)
event.add_command(keptn_cli)
metadata.add_command(keptn_cli)
project.add_command(keptn_cli)
service.add_command(keptn_cli)
