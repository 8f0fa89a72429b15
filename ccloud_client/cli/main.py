"""Main CLI entry point for the Confluent Cloud client."""

import click
import sys
import json
from pathlib import Path

from ccloud_client import __version__
from ccloud_client.cli.api_key_commands import api_key_cli
from ccloud_client.cli.cluster_commands import cluster_cli
from ccloud_client.cli.config import (
    DEFAULT_CONFIG_PATH, load_cli_config, mask_secrets, update_cli_config
)
from ccloud_client.cli.org_commands import environment_cli, service_account_cli
from ccloud_client.logging_config import setup_logging


@click.group()
@click.option('--config-file', '-c', default=str(DEFAULT_CONFIG_PATH),
              help='Configuration file path')
@click.option('--base-url', help='Control-plane API base URL')
@click.option('--api-key', help='Cloud API key')
@click.option('--api-secret', help='Cloud API secret')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config_file, base_url, api_key, api_secret, verbose):
    """Confluent Cloud CLI - Manage Kafka clusters and API keys."""

    if verbose:
        setup_logging()

    ctx.ensure_object(dict)

    config_path = Path(config_file).expanduser()
    cli_config = load_cli_config(config_path)

    # Command line options win over file and environment
    if base_url:
        cli_config['base_url'] = base_url
    if api_key:
        cli_config['api_key'] = api_key
    if api_secret:
        cli_config['api_secret'] = api_secret

    ctx.obj['config'] = cli_config
    ctx.obj['config_path'] = config_path


@cli.command()
@click.option('--api-key', required=True, help='Cloud API key')
@click.option('--api-secret', required=True, prompt=True, hide_input=True, help='Cloud API secret')
@click.option('--base-url', help='Control-plane API base URL')
@click.pass_context
def configure(ctx, api_key, api_secret, base_url):
    """Store cloud API credentials in the configuration file."""

    updates = {
        'api_key': api_key,
        'api_secret': api_secret
    }
    if base_url:
        updates['base_url'] = base_url

    config_path = ctx.obj['config_path']
    # Other stored values, such as the cluster API key, are kept
    update_cli_config(config_path, updates)

    click.echo(f"Configuration saved to {config_path}")
    click.echo(f"   API key: {api_key}")


@cli.command()
@click.pass_context
def config(ctx):
    """Show current configuration."""

    click.echo(f"Configuration file: {ctx.obj['config_path']}")
    click.echo("Current configuration:")
    click.echo(json.dumps(mask_secrets(ctx.obj['config']), indent=2))


@cli.command()
def version():
    """Show version information."""

    click.echo("Confluent Cloud client CLI")
    click.echo(f"Version: {__version__}")


cli.add_command(cluster_cli, name='cluster')
cli.add_command(api_key_cli, name='api-key')
cli.add_command(environment_cli, name='environment')
cli.add_command(service_account_cli, name='service-account')


def main():
    """Main entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user")
        sys.exit(1)


if __name__ == '__main__':
    main()
