from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import yaml
from kubernetes.client import ApiClient
from kubernetes.client.rest import ApiException

from kube_gateway.exceptions import BadRequest, UnsupportedMediaType, api_error_message

if TYPE_CHECKING:
    from kube_gateway.services.resources import ResourceKind

JSON_MEDIA_TYPE = "application/json"
YAML_MEDIA_TYPE = "application/x-yaml"


def media_type(content_type: str | None) -> str:
    """Strip parameters such as ``; charset=utf-8`` and normalise case."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


class ContentDecoder:
    """Turns request bodies into typed kubernetes models, and models back into JSON."""

    def __init__(self, api_client: ApiClient | None = None) -> None:
        self._api_client = api_client or ApiClient()

    def decode(self, content_type: str | None, body: bytes | str, kind: ResourceKind) -> Any:
        mt = media_type(content_type)
        try:
            if mt == JSON_MEDIA_TYPE:
                document = json.loads(body)
            elif mt == YAML_MEDIA_TYPE:
                document = yaml.safe_load(body)
            else:
                raise UnsupportedMediaType("Unsupported content type")
        except (ValueError, yaml.YAMLError) as exc:
            raise BadRequest(str(exc)) from exc

        if not isinstance(document, dict):
            raise BadRequest(f"{kind.kind} manifest must be an object")

        try:
            return self._api_client._ApiClient__deserialize(document, kind.model)
        except ApiException as exc:
            raise BadRequest(api_error_message(exc)) from exc
        except (TypeError, ValueError, AttributeError) as exc:
            raise BadRequest(str(exc)) from exc

    def encode(self, obj: Any) -> Any:
        """Serialize a model using the API's own camelCase field names."""
        return self._api_client.sanitize_for_serialization(obj)
