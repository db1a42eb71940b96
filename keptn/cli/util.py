"""
Common utilities for the CLI.
"""

import sys
import traceback
from typing import Any, Dict, Optional

import click
from loguru import logger
from rich.console import Console

from keptn.api.errors import KeptnAPIError, KeptnConfigurationError
from keptn.api.handler import APIHandler

console = Console(highlight=False)


class _ValidatedCommand(click.Command):
    """Global guard: forbid empty or whitespace-only string values from CLI.

    This validates only values provided from COMMANDLINE source, and supports
    both single-value and multiple=True options. It does not change default
    values or environment-derived values.
    """

    def invoke(self, ctx):
        def _is_blank_str(v):
            return isinstance(v, str) and v.strip() == ""

        for param_name, param_value in ctx.params.items():
            # Only enforce for values explicitly provided on the command line
            src = ctx.get_parameter_source(param_name)
            if src != click.core.ParameterSource.COMMANDLINE:
                continue

            blank = _is_blank_str(param_value) or (
                isinstance(param_value, (list, tuple))
                and any(_is_blank_str(x) for x in param_value)
            )
            if not blank:
                continue
            param_obj = next(
                (p for p in self.params if getattr(p, "name", None) == param_name),
                None,
            )
            msg = (
                "must not be empty or only whitespace. Omit the flag instead of"
                " passing an empty string."
            )
            if param_obj is not None:
                raise click.BadParameter(msg, param=param_obj)
            ctx.fail(f"Option '--{param_name}' {msg}")

        return super().invoke(ctx)


def click_group(*args, **kwargs):
    """
    A wrapper around click.group that allows for command shorthands as long as
    they are unambiguous. For example, the command `keptn project` can be
    shortened to `keptn proj` as `proj` uniquely identifies the `project` command.

    Errors raised by the api are printed and turned into exit code 1.
    """

    class ClickAliasedGroup(click.Group):
        def get_command(self, ctx, cmd_name):
            rv = click.Group.get_command(self, ctx, cmd_name)
            if rv is not None:
                return rv

            def is_abbrev(x, y):
                # first char must match
                if x[0] != y[0]:
                    return False
                it = iter(y)
                return all(any(c == ch for c in it) for ch in x)

            matches = [x for x in self.list_commands(ctx) if is_abbrev(cmd_name, x)]

            if not matches:
                return None
            elif len(matches) == 1:
                return click.Group.get_command(self, ctx, matches[0])
            ctx.fail(f"'{cmd_name}' is ambiguous: {', '.join(sorted(matches))}")

        def resolve_command(self, ctx, args):
            # always return the full command name
            _, cmd, args = super().resolve_command(ctx, args)
            return cmd.name, cmd, args

        def command(self, *c_args, **c_kwargs):
            # Ensure all commands under this group use the empty-string guard by default
            if "cls" not in c_kwargs:
                c_kwargs["cls"] = _ValidatedCommand
            return super().command(*c_args, **c_kwargs)

        def group(self, *g_args, **g_kwargs):
            # Ensure nested groups also inherit this group's behavior
            if "cls" not in g_kwargs:
                g_kwargs["cls"] = ClickAliasedGroup
            return super().group(*g_args, **g_kwargs)

        def invoke(self, ctx):
            try:
                return super().invoke(ctx)
            except KeptnConfigurationError as e:
                console.print(f"[red]Configuration error[/]: {e}")
                sys.exit(1)
            except KeptnAPIError as e:
                if e.status_code == 401:
                    console.print(
                        f"\n[red]401 Unauthorized[/]: {e.message}\n\n"
                        "[yellow]Hint:[/yellow]"
                        " This may be caused by an invalid api token or auth header."
                        " Check KEPTN_API_TOKEN and KEPTN_AUTH_HEADER, or pass"
                        " --token and --auth-header.\n"
                    )
                elif e.status_code is not None:
                    console.print(f"[red]{e.status_code} Error[/]: {e.message}")
                else:
                    console.print(f"[red]Error[/]: {e.message}")
                sys.exit(1)
            except (click.ClickException, click.exceptions.Exit):
                raise
            except ValueError as e:
                console.print(f"[red]Error[/]: {e}")
                logger.trace(traceback.format_exc())
                sys.exit(1)

    return click.group(*args, cls=ClickAliasedGroup, **kwargs)


# Connection options given to the root command. Unset options are resolved from
# the environment by APIHandler.from_env.
_client_options: Dict[str, Optional[str]] = {}

# Singleton API handler for CLI process
_client_singleton: Optional[APIHandler] = None


def set_client_options(**options: Optional[str]) -> None:
    global _client_singleton
    _client_options.clear()
    _client_options.update({k: v for k, v in options.items() if v})
    _client_singleton = None


def get_client() -> APIHandler:
    global _client_singleton
    if _client_singleton is None:
        _client_singleton = APIHandler.from_env(**_client_options)
    return _client_singleton


def check(condition: Any, message: str) -> None:
    """
    Checks a condition and prints a message if the condition is false.

    :param condition: The condition to check.
    :param message: The message to print if the condition is false.
    """
    if not condition:
        console.print(message)
        sys.exit(1)


def parse_key_values(pairs, what: str) -> Dict[str, str]:
    """
    Parses a list of `key=value` strings, as given by a multiple=True option.
    """
    result = {}
    for pair in pairs:
        check("=" in pair, f"Invalid {what} [red]{pair}[/]. Use the format key=value.")
        key, value = pair.split("=", 1)
        result[key] = value
    return result
