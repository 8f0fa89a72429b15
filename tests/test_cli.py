"""Tests for CLI interface."""

import json
import os
import tempfile
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from ccloud_client.cli.config import (
    build_client_config, get_client, load_cli_config, mask_secrets, read_cli_config_file,
    save_cli_config, update_cli_config
)
from ccloud_client.cli.main import cli
from ccloud_client.exceptions import ConfigurationError, TransportError, UnexpectedStatusError
from ccloud_client.models.api_key import APIKey
from ccloud_client.models.cluster import KafkaCluster, KafkaClusterList
from ccloud_client.models.environment import EnvironmentList
from ccloud_client.models.service_account import ServiceAccountList


class TestCLIConfig:
    """Test CLI configuration management."""

    def test_load_missing_file_returns_defaults(self, tmp_path):
        """Test a missing file falls back to environment defaults."""
        config = load_cli_config(tmp_path / 'missing.json')

        assert 'base_url' in config
        assert 'api_key' in config

    def test_save_and_load_config(self, tmp_path):
        """Test saving and loading configuration."""
        config_path = tmp_path / 'nested' / 'config.json'

        save_cli_config(config_path, {'api_key': 'KEY', 'api_secret': 'SECRET',
                                      'base_url': 'https://api.test.confluent.cloud'})
        loaded_config = load_cli_config(config_path)

        assert loaded_config['api_key'] == 'KEY'
        assert loaded_config['api_secret'] == 'SECRET'
        assert loaded_config['base_url'] == 'https://api.test.confluent.cloud'
        assert config_path.stat().st_mode & 0o777 == 0o600

    def test_save_is_private_from_creation(self, tmp_path):
        """Test the file is created owner-only under a permissive umask."""
        config_path = tmp_path / 'config.json'
        created_modes = []
        real_open = os.open

        def recording_open(path, flags, mode=0o777):
            created_modes.append(mode)
            return real_open(path, flags, mode)

        with patch('ccloud_client.cli.config.os.open', side_effect=recording_open):
            save_cli_config(config_path, {'api_secret': 'SECRET'})

        assert created_modes == [0o600]
        assert config_path.stat().st_mode & 0o777 == 0o600

    def test_save_tightens_existing_file(self, tmp_path):
        """Test an existing world-readable file is made private."""
        config_path = tmp_path / 'config.json'
        config_path.write_text("{}")
        config_path.chmod(0o644)

        save_cli_config(config_path, {'api_secret': 'SECRET'})

        assert config_path.stat().st_mode & 0o777 == 0o600

    def test_update_keeps_other_values(self, tmp_path):
        """Test updating credentials keeps unrelated stored values."""
        config_path = tmp_path / 'config.json'
        save_cli_config(config_path, {'api_key': 'OLD', 'kafka_api_key': 'KK', 'kafka_api_secret': 'KS'})

        stored = update_cli_config(config_path, {'api_key': 'NEW', 'api_secret': 'S'})

        assert stored == {'api_key': 'NEW', 'api_secret': 'S', 'kafka_api_key': 'KK', 'kafka_api_secret': 'KS'}
        assert json.loads(config_path.read_text()) == stored

    def test_non_object_file_is_ignored(self, tmp_path):
        """Test a JSON file that is not an object counts as empty."""
        config_path = tmp_path / 'config.json'
        config_path.write_text("[1, 2]")

        assert read_cli_config_file(config_path) == {}

    def test_corrupt_file_returns_defaults(self, tmp_path):
        """Test an unreadable file does not break the CLI."""
        config_path = tmp_path / 'config.json'
        config_path.write_text("{not json")

        config = load_cli_config(config_path)

        assert 'api_key' in config

    def test_build_client_config_requires_credentials(self):
        """Test missing credentials are a configuration error."""
        with pytest.raises(ConfigurationError):
            build_client_config({'base_url': None, 'api_key': None, 'api_secret': None})

    def test_build_client_config(self):
        """Test the client configuration is built from the context."""
        client_config = build_client_config({'api_key': 'K', 'api_secret': 'S', 'timeout': 5.0})

        assert client_config.credentials == ('K', 'S')
        assert client_config.timeout == 5.0

    def test_get_client_is_created_once(self):
        """Test the context caches the client."""
        ctx_obj = {'config': {'api_key': 'K', 'api_secret': 'S'}}

        client = get_client(ctx_obj)

        assert get_client(ctx_obj) is client
        client.close()

    def test_mask_secrets(self):
        """Test secrets are hidden before printing."""
        masked = mask_secrets({'api_key': 'K', 'api_secret': 'S', 'kafka_api_secret': None})

        assert masked == {'api_key': 'K', 'api_secret': '****', 'kafka_api_secret': None}


class TestCLICommands:
    """Test CLI commands."""

    @pytest.fixture
    def runner(self):
        """Create CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def mock_client(self):
        """Mock client shared through the CLI context."""
        return Mock()

    @pytest.fixture
    def temp_config(self):
        """Create temporary config file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            json.dump({'api_key': 'KEY', 'api_secret': 'SECRET'}, f)
            config_path = f.name

        yield config_path

        Path(config_path).unlink(missing_ok=True)

    def invoke(self, runner, mock_client, args, temp_config, **kwargs):
        return runner.invoke(cli, ['--config-file', temp_config] + args,
                             obj={'client': mock_client}, **kwargs)

    def test_cli_help(self, runner):
        """Test main CLI help."""
        result = runner.invoke(cli, ['--help'])

        assert result.exit_code == 0
        assert 'Confluent Cloud CLI' in result.output
        assert 'cluster' in result.output
        assert 'api-key' in result.output

    def test_version_command(self, runner):
        """Test version command."""
        result = runner.invoke(cli, ['version'])

        assert result.exit_code == 0
        assert 'Version: 0.1.0' in result.output

    def test_configure_command(self, runner, tmp_path):
        """Test storing credentials."""
        config_path = tmp_path / 'config.json'

        result = runner.invoke(cli, ['--config-file', str(config_path), 'configure',
                                     '--api-key', 'KEY', '--api-secret', 'SECRET'])

        assert result.exit_code == 0
        assert json.loads(config_path.read_text()) == {'api_key': 'KEY', 'api_secret': 'SECRET'}

    def test_configure_keeps_cluster_credentials(self, runner, tmp_path):
        """Test reconfiguring the cloud key keeps the stored cluster key."""
        config_path = tmp_path / 'config.json'
        config_path.write_text(json.dumps({'api_key': 'OLD', 'api_secret': 'OLD',
                                           'kafka_api_key': 'KK', 'kafka_api_secret': 'KS'}))

        result = runner.invoke(cli, ['--config-file', str(config_path), 'configure',
                                     '--api-key', 'KEY', '--api-secret', 'SECRET'])

        assert result.exit_code == 0
        assert json.loads(config_path.read_text()) == {
            'api_key': 'KEY', 'api_secret': 'SECRET', 'kafka_api_key': 'KK', 'kafka_api_secret': 'KS'
        }
        assert config_path.stat().st_mode & 0o777 == 0o600

    def test_config_command_masks_secret(self, runner, temp_config):
        """Test the secret is never printed."""
        result = runner.invoke(cli, ['--config-file', temp_config, 'config'])

        assert result.exit_code == 0
        assert 'KEY' in result.output
        assert 'SECRET' not in result.output

    def test_cluster_list(self, runner, mock_client, temp_config, cluster_json):
        """Test listing clusters as a table."""
        mock_client.clusters.list_kafka_clusters.return_value = KafkaClusterList.model_validate({
            "metadata": {"next": "https://api.confluent.cloud/cmk/v2/clusters?page_token=abc"},
            "data": [cluster_json]
        })

        result = self.invoke(runner, mock_client, ['cluster', 'list', '--environment', 'env-1'], temp_config)

        assert result.exit_code == 0
        assert 'lkc-abc123' in result.output
        assert 'PROVISIONING' in result.output
        assert '--page-token abc' in result.output
        options = mock_client.clusters.list_kafka_clusters.call_args[0][0]
        assert options.to_query_params() == {"environment": "env-1"}

    def test_cluster_list_json(self, runner, mock_client, temp_config, cluster_json):
        """Test listing clusters as JSON."""
        mock_client.clusters.list_kafka_clusters.return_value = KafkaClusterList.model_validate(
            {"data": [cluster_json]}
        )

        result = self.invoke(runner, mock_client, ['cluster', 'list', '--format', 'json'], temp_config)

        assert result.exit_code == 0
        assert json.loads(result.output)['data'][0]['spec']['display_name'] == 'prod'

    def test_cluster_get(self, runner, mock_client, temp_config, cluster_json):
        """Test showing a cluster."""
        mock_client.clusters.get_kafka_cluster.return_value = KafkaCluster.model_validate(cluster_json)

        result = self.invoke(runner, mock_client, ['cluster', 'get', 'lkc-abc123', '-e', 'env-1'], temp_config)

        assert result.exit_code == 0
        assert 'REST endpoint: https://pkc-00000' in result.output

    def test_cluster_create(self, runner, mock_client, temp_config, cluster_json):
        """Test requesting a cluster."""
        mock_client.clusters.create_kafka_cluster.return_value = KafkaCluster.model_validate(cluster_json)

        result = self.invoke(runner, mock_client, [
            'cluster', 'create', 'prod', '--environment', 'env-1', '--cloud', 'AWS', '--region', 'us-east-1'
        ], temp_config)

        assert result.exit_code == 0
        assert 'Cluster lkc-abc123 accepted' in result.output
        request = mock_client.clusters.create_kafka_cluster.call_args[0][0]
        assert request.display_name == 'prod'
        assert request.availability == 'SINGLE_ZONE'
        assert request.environment.id == 'env-1'

    def test_cluster_update_requires_change(self, runner, mock_client, temp_config):
        """Test update without changes is a usage error."""
        result = self.invoke(runner, mock_client, ['cluster', 'update', 'lkc-abc123', '-e', 'env-1'],
                             temp_config)

        assert result.exit_code == 2
        mock_client.clusters.update_kafka_cluster.assert_not_called()

    def test_cluster_delete(self, runner, mock_client, temp_config):
        """Test deleting with confirmation skipped."""
        result = self.invoke(runner, mock_client, ['cluster', 'delete', 'lkc-abc123', '-e', 'env-1', '--yes'],
                             temp_config)

        assert result.exit_code == 0
        assert 'Cluster lkc-abc123 deleted' in result.output

    def test_cluster_delete_failure(self, runner, mock_client, temp_config):
        """Test an API error aborts with a message."""
        mock_client.clusters.delete_kafka_cluster.side_effect = UnexpectedStatusError(
            "delete kafka cluster", 404, "Not Found", {200, 204}, body='{"errors":[]}'
        )

        result = self.invoke(runner, mock_client, ['cluster', 'delete', 'lkc-x', '-e', 'env-1', '-y'],
                             temp_config)

        assert result.exit_code == 1
        assert 'failed to delete kafka cluster: 404 Not Found' in result.output

    def test_cluster_delete_declined(self, runner, mock_client, temp_config):
        """Test declining the prompt leaves the cluster alone."""
        result = self.invoke(runner, mock_client, ['cluster', 'delete', 'lkc-abc123', '-e', 'env-1'],
                             temp_config, input='n\n')

        assert result.exit_code == 1
        mock_client.clusters.delete_kafka_cluster.assert_not_called()

    def test_cluster_set_config(self, runner, mock_client, temp_config):
        """Test setting a broker config."""
        result = self.invoke(runner, mock_client, [
            'cluster', 'set-config', 'lkc-abc123', 'retention.ms', '604800000',
            '--endpoint', 'https://pkc-00000.us-east-1.aws.confluent.cloud:443'
        ], temp_config)

        assert result.exit_code == 0
        mock_client.clusters.update_kafka_cluster_config.assert_called_once_with(
            'https://pkc-00000.us-east-1.aws.confluent.cloud:443', 'lkc-abc123', 'retention.ms', '604800000'
        )

    def test_api_key_create(self, runner, mock_client, temp_config, api_key_json):
        """Test the secret is shown once on creation."""
        mock_client.api_keys.create_api_key.return_value = APIKey.model_validate(api_key_json)

        result = self.invoke(runner, mock_client, [
            'api-key', 'create', '--owner', 'sa-123', '--resource', 'lkc-abc123',
            '--resource-environment', 'env-1'
        ], temp_config)

        assert result.exit_code == 0
        assert 'ABCDEFGHIJKLMNOP' in result.output
        assert 's3cr3t' in result.output
        request = mock_client.api_keys.create_api_key.call_args[0][0]
        assert request.resource.environment == 'env-1'

    def test_api_key_list_transport_error(self, runner, mock_client, temp_config):
        """Test network failures abort with a message."""
        mock_client.api_keys.list_api_keys.side_effect = TransportError("GET https://x failed")

        result = self.invoke(runner, mock_client, ['api-key', 'list'], temp_config)

        assert result.exit_code == 1
        assert 'failed to list api keys' in result.output

    def test_environment_list(self, runner, mock_client, temp_config):
        """Test listing environments."""
        mock_client.environments.list_environments.return_value = EnvironmentList.model_validate(
            {"data": [{"id": "env-1", "display_name": "production"}]}
        )

        result = self.invoke(runner, mock_client, ['environment', 'list'], temp_config)

        assert result.exit_code == 0
        assert 'production' in result.output

    def test_service_account_list_empty(self, runner, mock_client, temp_config):
        """Test an empty page."""
        mock_client.service_accounts.list_service_accounts.return_value = ServiceAccountList.model_validate(
            {"data": []}
        )

        result = self.invoke(runner, mock_client, ['service-account', 'list'], temp_config)

        assert result.exit_code == 0
        assert 'No results' in result.output
