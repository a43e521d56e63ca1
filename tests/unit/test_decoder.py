"""Tests for request body decoding."""

import json

import pytest
from kubernetes import client

from kube_gateway.exceptions import BadRequest, UnsupportedMediaType
from kube_gateway.services.decoder import ContentDecoder, media_type
from kube_gateway.services.resources import CONFIG_MAP, DEPLOYMENT, POD, SERVICE

POD_MANIFEST = {
    "apiVersion": "v1",
    "kind": "Pod",
    "metadata": {"name": "web", "labels": {"app": "web"}},
    "spec": {"containers": [{"name": "web", "image": "nginx:1.25", "ports": [{"containerPort": 80}]}]},
}

DEPLOYMENT_YAML = """
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  namespace: shop
spec:
  replicas: 2
  selector:
    matchLabels:
      app: web
  template:
    metadata:
      labels:
        app: web
    spec:
      containers:
        - name: web
          image: nginx:1.25
"""


@pytest.fixture
def decoder():
    return ContentDecoder()


class TestMediaType:
    def test_plain(self):
        assert media_type("application/json") == "application/json"

    def test_parameters_and_case_ignored(self):
        assert media_type("Application/JSON; charset=utf-8") == "application/json"

    def test_missing(self):
        assert media_type(None) == ""
        assert media_type("") == ""


class TestContentDecoder:
    def test_decode_json_pod(self, decoder):
        pod = decoder.decode("application/json", json.dumps(POD_MANIFEST).encode(), POD)
        assert isinstance(pod, client.V1Pod)
        assert pod.metadata.name == "web"
        assert pod.metadata.namespace is None
        assert pod.spec.containers[0].image == "nginx:1.25"
        assert pod.spec.containers[0].ports[0].container_port == 80

    def test_decode_yaml_deployment(self, decoder):
        deployment = decoder.decode("application/x-yaml", DEPLOYMENT_YAML.encode(), DEPLOYMENT)
        assert isinstance(deployment, client.V1Deployment)
        assert deployment.metadata.namespace == "shop"
        assert deployment.spec.replicas == 2
        assert deployment.spec.template.spec.containers[0].name == "web"

    def test_decode_service_and_config_map(self, decoder):
        service = decoder.decode(
            "application/json",
            b'{"metadata": {"name": "web"}, "spec": {"ports": [{"port": 80, "protocol": "TCP"}]}}',
            SERVICE,
        )
        assert service.spec.ports[0].port == 80

        config_map = decoder.decode("application/x-yaml", b"metadata:\n  name: cfg\ndata:\n  key: value\n", CONFIG_MAP)
        assert config_map.data == {"key": "value"}

    @pytest.mark.parametrize("content_type", ["text/plain", "application/xml", "", None])
    def test_unsupported_content_type(self, decoder, content_type):
        with pytest.raises(UnsupportedMediaType):
            decoder.decode(content_type, json.dumps(POD_MANIFEST).encode(), POD)

    def test_malformed_json(self, decoder):
        with pytest.raises(BadRequest) as excinfo:
            decoder.decode("application/json", b'{"metadata": {"name": "web"', POD)
        assert excinfo.value.status_code == 400
        assert excinfo.value.message

    def test_malformed_yaml(self, decoder):
        with pytest.raises(BadRequest):
            decoder.decode("application/x-yaml", b"metadata: [unclosed", POD)

    def test_non_object_document(self, decoder):
        with pytest.raises(BadRequest) as excinfo:
            decoder.decode("application/json", b"[1, 2, 3]", POD)
        assert "Pod manifest must be an object" in excinfo.value.message

    def test_empty_body(self, decoder):
        with pytest.raises(BadRequest):
            decoder.decode("application/json", b"", POD)

    def test_schema_mismatch(self, decoder):
        # A container without a name cannot be represented
        body = json.dumps({"metadata": {"name": "web"}, "spec": {"containers": [{"image": "nginx"}]}}).encode()
        with pytest.raises(BadRequest) as excinfo:
            decoder.decode("application/json", body, POD)
        assert "name" in excinfo.value.message

    def test_encode_uses_api_field_names(self, decoder):
        pod = decoder.decode("application/json", json.dumps(POD_MANIFEST).encode(), POD)
        encoded = decoder.encode(pod)
        assert encoded["spec"]["containers"][0]["ports"][0] == {"containerPort": 80}
        assert encoded["metadata"]["labels"] == {"app": "web"}
