"""CLI commands for API key management."""

import click

from ccloud_client.cli.config import get_client
from ccloud_client.cli.output import echo_json, echo_next_page, echo_table, reports_errors
from ccloud_client.models.api_key import APIKeyListOptions, CreateAPIKeyRequest
from ccloud_client.models.common import EnvironmentScopedReference


@click.group()
def api_key_cli():
    """API key management commands."""
    pass


@api_key_cli.command('create')
@click.option('--owner', required=True, help='Owning principal ID, e.g. sa-abc123')
@click.option('--resource', required=True, help='Resource ID the key grants access to, e.g. lkc-abc123')
@click.option('--resource-environment', help='Environment of the resource')
@click.option('--name', help='Display name')
@click.option('--description', help='Description')
@click.option('--format', '-f', 'output_format', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@click.pass_context
@reports_errors('create api key')
def create_api_key(ctx, owner, resource, resource_environment, name, description, output_format):
    """Create an API key. The secret is shown only once."""
    request = CreateAPIKeyRequest(
        display_name=name,
        description=description,
        owner=EnvironmentScopedReference(id=owner),
        resource=EnvironmentScopedReference(id=resource, environment=resource_environment)
    )
    api_key = get_client(ctx.obj).api_keys.create_api_key(request)

    if output_format == 'json':
        echo_json(api_key)
        return

    click.echo(f"API key: {api_key.id}")
    click.echo(f"Secret:  {api_key.spec.secret}")
    click.echo("Save the secret now, it cannot be retrieved later.")


@api_key_cli.command('list')
@click.option('--owner', help='Owner principal filter')
@click.option('--resource', help='Resource filter')
@click.option('--page-size', type=int, help='Maximum keys per page')
@click.option('--page-token', help='Token of the page to fetch')
@click.pass_context
@reports_errors('list api keys')
def list_api_keys(ctx, owner, resource, page_size, page_token):
    """List API keys."""
    options = APIKeyListOptions(owner=owner, resource=resource, page_size=page_size,
                                page_token=page_token)
    api_keys = get_client(ctx.obj).api_keys.list_api_keys(options)

    rows = [
        [
            key.id,
            key.spec.display_name,
            key.spec.owner.id if key.spec.owner else None,
            key.spec.resource.id if key.spec.resource else None
        ]
        for key in api_keys.data
    ]
    echo_table(['Key', 'Name', 'Owner', 'Resource'], rows)
    echo_next_page(api_keys.metadata.next_page_token)


@api_key_cli.command('delete')
@click.argument('api_key_id')
@click.pass_context
@reports_errors('delete api key')
def delete_api_key(ctx, api_key_id):
    """Revoke an API key."""
    get_client(ctx.obj).api_keys.delete_api_key(api_key_id)
    click.echo(f"API key {api_key_id} deleted")
