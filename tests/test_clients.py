from unittest.mock import patch

import pytest
from kubernetes.config.config_exception import ConfigException

from service_open.errors import HostNotFoundError
from service_open.kubernetes.clients import describe_api_error, load_clients


def test_missing_kubeconfig_is_host_not_found(tmp_path):
    missing = tmp_path / "no-such-kubeconfig"
    with pytest.raises(HostNotFoundError, match="Cannot load cluster configuration"):
        load_clients(kubeconfig=str(missing))


def test_unknown_context_is_host_not_found():
    with patch(
        "service_open.kubernetes.clients.config.load_kube_config",
        side_effect=ConfigException("Expected key current-context in kube-config"),
    ):
        with pytest.raises(HostNotFoundError, match="current-context"):
            load_clients(context="nope")


def test_describe_api_error_for_transport_failure():
    assert describe_api_error(OSError("refused")) == "connection failed (refused)"
