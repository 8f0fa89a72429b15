"""Kafka cluster and broker config operations."""

import logging
from typing import Optional

from ccloud_client.clients.base import ResourceOperations, path_segment
from ccloud_client.models.cluster import (
    KafkaCluster, KafkaClusterConfigUpdateRequest, KafkaClusterCreateRequest,
    KafkaClusterList, KafkaClusterListOptions, KafkaClusterUpdateRequest
)
from ccloud_client.models.common import wrap_spec

logger = logging.getLogger(__name__)

CLUSTERS_PATH = "/cmk/v2/clusters"


class KafkaClusterOperations(ResourceOperations):
    """Cluster lifecycle on the control plane, broker configs on the data plane.

    Creation and updates are asynchronous on the server side: the returned
    cluster reflects the accepted request, not the provisioned state. Callers
    that need to wait poll ``get_kafka_cluster`` themselves.
    """

    EXPECTED_STATUS = {
        'list_kafka_clusters': frozenset({200}),
        'get_kafka_cluster': frozenset({200}),
        'create_kafka_cluster': frozenset({202}),
        'update_kafka_cluster': frozenset({202}),
        # The API documents both codes for delete
        'delete_kafka_cluster': frozenset({200, 204}),
        'update_kafka_cluster_configs': frozenset({204}),
        'update_kafka_cluster_config': frozenset({204}),
    }

    def list_kafka_clusters(self, options: Optional[KafkaClusterListOptions] = None) -> KafkaClusterList:
        """List one page of clusters, optionally filtered by environment."""
        return self._call('list_kafka_clusters', 'GET', CLUSTERS_PATH,
                          query_options=options, response_model=KafkaClusterList)

    def get_kafka_cluster(self, cluster_id: str,
                          options: Optional[KafkaClusterListOptions] = None) -> KafkaCluster:
        """Get a single cluster."""
        path = f"{CLUSTERS_PATH}/{path_segment(cluster_id)}"
        return self._call('get_kafka_cluster', 'GET', path,
                          query_options=options, response_model=KafkaCluster)

    def create_kafka_cluster(self, create: KafkaClusterCreateRequest) -> KafkaCluster:
        """Request a new cluster.

        Args:
            create: Cluster name, placement and capacity

        Returns:
            The accepted cluster, usually still in the PROVISIONING phase
        """
        cluster = self._call('create_kafka_cluster', 'POST', CLUSTERS_PATH,
                             body=wrap_spec(create), response_model=KafkaCluster)
        logger.info(f"Kafka cluster {cluster.id} ({create.display_name}) accepted for provisioning")
        return cluster

    def update_kafka_cluster(self, cluster_id: str, update: KafkaClusterUpdateRequest) -> KafkaCluster:
        """Rename or resize a cluster."""
        path = f"{CLUSTERS_PATH}/{path_segment(cluster_id)}"
        cluster = self._call('update_kafka_cluster', 'PATCH', path,
                             body=wrap_spec(update), response_model=KafkaCluster)
        logger.info(f"Kafka cluster {cluster_id} update accepted")
        return cluster

    def delete_kafka_cluster(self, cluster_id: str,
                             options: Optional[KafkaClusterListOptions] = None) -> None:
        """Delete a cluster."""
        path = f"{CLUSTERS_PATH}/{path_segment(cluster_id)}"
        self._call('delete_kafka_cluster', 'DELETE', path, query_options=options)
        logger.info(f"Kafka cluster {cluster_id} deleted")

    def update_kafka_cluster_configs(self, rest_endpoint: str, cluster_id: str,
                                     update: KafkaClusterConfigUpdateRequest) -> None:
        """Apply a batch of broker config changes through the cluster REST endpoint.

        Args:
            rest_endpoint: The cluster's HTTP endpoint (``spec.http_endpoint``)
            cluster_id: Cluster identifier
            update: Config entries to set or delete
        """
        path = f"/kafka/v3/clusters/{path_segment(cluster_id)}/broker-configs:alter"
        self._call('update_kafka_cluster_configs', 'POST', path,
                   body=update.to_payload(), host=rest_endpoint)
        logger.info(f"Altered {len(update.data)} broker configs on cluster {cluster_id}")

    def update_kafka_cluster_config(self, rest_endpoint: str, cluster_id: str,
                                    config_name: str, value: str) -> None:
        """Set a single broker config through the cluster REST endpoint."""
        path = (f"/kafka/v3/clusters/{path_segment(cluster_id)}"
                f"/broker-configs/{path_segment(config_name)}")
        self._call('update_kafka_cluster_config', 'PUT', path,
                   body={'value': value}, host=rest_endpoint)
        logger.info(f"Set broker config {config_name} on cluster {cluster_id}")
