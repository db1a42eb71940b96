# flake8: noqa
"""
This implements the CLI for the Keptn python client. When you install the
library, you get a command line tool called `keptn` that you can use to manage
projects and services, send events and trigger evaluations.
"""

# Guard so that keptn.api never depends on things under keptn.cli.
import keptn.api as _

from .cli import keptn_cli as keptn
