"""CLI commands for Kafka cluster management."""

import click

from ccloud_client.cli.config import get_client
from ccloud_client.cli.output import echo_json, echo_next_page, echo_table, reports_errors
from ccloud_client.models.cluster import (
    KafkaClusterAvailability, KafkaClusterCreateConfig, KafkaClusterCreateRequest,
    KafkaClusterKind, KafkaClusterListOptions, KafkaClusterUpdateConfig,
    KafkaClusterUpdateRequest
)
from ccloud_client.models.common import CloudProvider, EnvironmentScopedReference

CLUSTER_HEADERS = ['ID', 'Name', 'Kind', 'Cloud', 'Region', 'Availability', 'Phase']


def _cluster_row(cluster):
    spec = cluster.spec
    return [
        cluster.id,
        spec.display_name,
        spec.config.kind if spec.config else None,
        spec.cloud,
        spec.region,
        spec.availability,
        cluster.status.phase if cluster.status else None
    ]


@click.group()
def cluster_cli():
    """Kafka cluster management commands."""
    pass


@cluster_cli.command('list')
@click.option('--environment', '-e', help='Environment ID filter')
@click.option('--page-size', type=int, help='Maximum clusters per page')
@click.option('--page-token', help='Token of the page to fetch')
@click.option('--format', '-f', 'output_format', type=click.Choice(['table', 'json']), default='table',
              help='Output format')
@click.pass_context
@reports_errors('list kafka clusters')
def list_clusters(ctx, environment, page_size, page_token, output_format):
    """List Kafka clusters."""
    options = KafkaClusterListOptions(environment_id=environment, page_size=page_size,
                                      page_token=page_token)
    clusters = get_client(ctx.obj).clusters.list_kafka_clusters(options)

    if output_format == 'json':
        echo_json(clusters)
        return

    echo_table(CLUSTER_HEADERS, [_cluster_row(c) for c in clusters.data])
    echo_next_page(clusters.metadata.next_page_token)


@cluster_cli.command('get')
@click.argument('cluster_id')
@click.option('--environment', '-e', required=True, help='Environment ID')
@click.option('--format', '-f', 'output_format', type=click.Choice(['table', 'json']), default='table',
              help='Output format')
@click.pass_context
@reports_errors('get kafka cluster')
def get_cluster(ctx, cluster_id, environment, output_format):
    """Show a Kafka cluster."""
    cluster = get_client(ctx.obj).clusters.get_kafka_cluster(
        cluster_id, KafkaClusterListOptions(environment_id=environment)
    )

    if output_format == 'json':
        echo_json(cluster)
        return

    echo_table(CLUSTER_HEADERS, [_cluster_row(cluster)])
    click.echo(f"Bootstrap endpoint: {cluster.spec.kafka_bootstrap_endpoint or 'pending'}")
    click.echo(f"REST endpoint: {cluster.spec.http_endpoint or 'pending'}")


@cluster_cli.command('create')
@click.argument('name')
@click.option('--environment', '-e', required=True, help='Environment ID')
@click.option('--cloud', type=click.Choice([c.value for c in CloudProvider]), required=True,
              help='Cloud provider')
@click.option('--region', required=True, help='Cloud region, e.g. us-east-1')
@click.option('--availability', type=click.Choice([a.value for a in KafkaClusterAvailability]),
              default=KafkaClusterAvailability.SINGLE_ZONE.value, help='Availability tier')
@click.option('--kind', type=click.Choice([k.value for k in KafkaClusterKind]),
              default=KafkaClusterKind.BASIC.value, help='Cluster type')
@click.option('--cku', type=int, help='CKU count for Dedicated clusters')
@click.option('--network', help='Network ID for Dedicated clusters')
@click.pass_context
@reports_errors('create kafka cluster')
def create_cluster(ctx, name, environment, cloud, region, availability, kind, cku, network):
    """Request a new Kafka cluster. Provisioning continues in the background."""
    request = KafkaClusterCreateRequest(
        display_name=name,
        availability=availability,
        cloud=cloud,
        region=region,
        config=KafkaClusterCreateConfig(kind=kind, cku=cku),
        environment=EnvironmentScopedReference(id=environment),
        network=EnvironmentScopedReference(id=network, environment=environment) if network else None
    )
    cluster = get_client(ctx.obj).clusters.create_kafka_cluster(request)

    click.echo(f"Cluster {cluster.id} accepted")
    if cluster.status and cluster.status.phase:
        click.echo(f"   Phase: {cluster.status.phase}")


@cluster_cli.command('update')
@click.argument('cluster_id')
@click.option('--environment', '-e', required=True, help='Environment ID')
@click.option('--name', help='New display name')
@click.option('--cku', type=int, help='New CKU count (Dedicated clusters only)')
@click.pass_context
@reports_errors('update kafka cluster')
def update_cluster(ctx, cluster_id, environment, name, cku):
    """Rename or resize a Kafka cluster."""
    if name is None and cku is None:
        raise click.UsageError("Nothing to update: pass --name and/or --cku")

    request = KafkaClusterUpdateRequest(
        display_name=name,
        config=KafkaClusterUpdateConfig(kind=KafkaClusterKind.DEDICATED, cku=cku) if cku else None,
        environment=EnvironmentScopedReference(id=environment)
    )
    cluster = get_client(ctx.obj).clusters.update_kafka_cluster(cluster_id, request)
    click.echo(f"Cluster {cluster.id} update accepted")


@cluster_cli.command('delete')
@click.argument('cluster_id')
@click.option('--environment', '-e', required=True, help='Environment ID')
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
@reports_errors('delete kafka cluster')
def delete_cluster(ctx, cluster_id, environment, yes):
    """Delete a Kafka cluster."""
    if not yes:
        click.confirm(f"Delete cluster {cluster_id}? All topics and data are lost", abort=True)

    get_client(ctx.obj).clusters.delete_kafka_cluster(
        cluster_id, KafkaClusterListOptions(environment_id=environment)
    )
    click.echo(f"Cluster {cluster_id} deleted")


@cluster_cli.command('set-config')
@click.argument('cluster_id')
@click.argument('config_name')
@click.argument('value')
@click.option('--endpoint', required=True, help="Cluster REST endpoint (the cluster's http_endpoint)")
@click.pass_context
@reports_errors('update kafka cluster config')
def set_config(ctx, cluster_id, config_name, value, endpoint):
    """Set a broker config on a Kafka cluster."""
    get_client(ctx.obj).clusters.update_kafka_cluster_config(endpoint, cluster_id, config_name, value)
    click.echo(f"{config_name}={value} set on cluster {cluster_id}")
