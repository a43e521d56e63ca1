from kubernetes.client.rest import ApiException

from kube_gateway.exceptions import BadRequest, GatewayError, InternalError, UnsupportedMediaType, api_error_message
from tests.factories import api_error


def test_status_codes():
    assert BadRequest("x").status_code == 400
    assert UnsupportedMediaType("x").status_code == 415
    assert InternalError("x").status_code == 500
    assert GatewayError("x", status_code=418).status_code == 418


def test_message_from_status_body():
    exc = api_error(404, "Not Found", 'deployments.apps "web" not found')
    assert api_error_message(exc) == 'deployments.apps "web" not found'


def test_message_falls_back_to_reason():
    exc = ApiException(status=502, reason="Bad Gateway")
    exc.body = "<html>upstream error</html>"
    assert api_error_message(exc) == "Bad Gateway"


def test_message_falls_back_to_str():
    assert api_error_message(TimeoutError("timed out")) == "timed out"
    assert api_error_message(RuntimeError()) == "RuntimeError"
