"""Output and error reporting helpers shared by CLI commands."""

import functools
import json
from typing import Any, Callable, List, Sequence

import click
from pydantic import BaseModel, ValidationError
from tabulate import tabulate

from ccloud_client.exceptions import CCloudError, UnexpectedStatusError


def reports_errors(action: str) -> Callable:
    """Turn client errors raised by a command into a message and a non-zero exit."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except UnexpectedStatusError as e:
                click.echo(f"Error: failed to {action}: {e.status}", err=True)
                if e.body:
                    click.echo(e.body, err=True)
                raise click.Abort()
            except (CCloudError, ValidationError) as e:
                click.echo(f"Error: failed to {action}: {e}", err=True)
                raise click.Abort()
        return wrapper

    return decorator


def echo_json(model: BaseModel) -> None:
    """Print a model as indented JSON."""
    click.echo(json.dumps(model.model_dump(mode='json', by_alias=True, exclude_none=True), indent=2))


def echo_table(headers: Sequence[str], rows: List[List[Any]]) -> None:
    """Print rows as a grid table."""
    if not rows:
        click.echo("No results")
        return
    click.echo(tabulate(rows, headers=headers, tablefmt='grid'))


def echo_next_page(next_page_token) -> None:
    """Hint how to fetch the next page of a list."""
    if next_page_token:
        click.echo(f"\nMore results available: --page-token {next_page_token}")
