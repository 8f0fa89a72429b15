"""CLI commands for environments and service accounts."""

import click

from ccloud_client.cli.config import get_client
from ccloud_client.cli.output import echo_next_page, echo_table, reports_errors
from ccloud_client.models.environment import EnvironmentListOptions
from ccloud_client.models.service_account import ServiceAccountListOptions


@click.group()
def environment_cli():
    """Environment commands."""
    pass


@environment_cli.command('list')
@click.option('--page-size', type=int, help='Maximum environments per page')
@click.option('--page-token', help='Token of the page to fetch')
@click.pass_context
@reports_errors('list environments')
def list_environments(ctx, page_size, page_token):
    """List environments."""
    options = EnvironmentListOptions(page_size=page_size, page_token=page_token)
    environments = get_client(ctx.obj).environments.list_environments(options)

    echo_table(['ID', 'Name'], [[env.id, env.display_name] for env in environments.data])
    echo_next_page(environments.metadata.next_page_token)


@click.group()
def service_account_cli():
    """Service account commands."""
    pass


@service_account_cli.command('list')
@click.option('--page-size', type=int, help='Maximum service accounts per page')
@click.option('--page-token', help='Token of the page to fetch')
@click.pass_context
@reports_errors('list service accounts')
def list_service_accounts(ctx, page_size, page_token):
    """List service accounts."""
    options = ServiceAccountListOptions(page_size=page_size, page_token=page_token)
    accounts = get_client(ctx.obj).service_accounts.list_service_accounts(options)

    rows = [[sa.id, sa.display_name, sa.description] for sa in accounts.data]
    echo_table(['ID', 'Name', 'Description'], rows)
    echo_next_page(accounts.metadata.next_page_token)
