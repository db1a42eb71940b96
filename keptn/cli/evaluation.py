"""
Evaluation is a module to trigger quality gate evaluations.
"""

import click

from .util import (
    console,
    check,
    click_group,
    get_client,
    parse_key_values,
)
from keptn.api.types.evaluation import Evaluation


@click_group()
def evaluation():
    """
    Trigger quality gate evaluations.
    """
    pass


@evaluation.command()
@click.option("--project", "-p", help="Project name", required=True)
@click.option("--stage", "-s", help="Stage name", required=True)
@click.option("--service", "-n", help="Service name", required=True)
@click.option("--start", help="Start of the evaluation, e.g. 2024-01-01T00:00:00")
@click.option("--end", help="End of the evaluation, e.g. 2024-01-01T00:05:00")
@click.option("--timeframe", help="Timeframe of the evaluation, e.g. 5m")
@click.option("--label", "-l", help="Label in the format key=value", multiple=True)
@click.option("--git-commit-id", help="Git commit the evaluation belongs to.")
def trigger(project, stage, service, start, end, timeframe, label, git_commit_id):
    """
    Triggers the evaluation of the quality gates of a service in a stage. The
    evaluation runs asynchronously; the printed keptn context identifies it.
    """
    check(
        not (timeframe and end),
        "[red]--timeframe and --end cannot be used together.[/]",
    )
    client = get_client()
    event_context = client.evaluation.trigger(
        project,
        stage,
        service,
        Evaluation(
            start=start,
            end=end,
            timeframe=timeframe,
            labels=parse_key_values(label, "label") or None,
            git_commit_id=git_commit_id,
        ),
    )
    check(event_context is not None, "[red]Keptn did not return an event context.[/]")
    console.print(
        "Evaluation triggered successfully. Keptn context:"
        f" [green]{event_context.keptn_context}[/]"
    )


def add_command(cli_group):
    cli_group.add_command(evaluation)
