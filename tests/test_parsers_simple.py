import json

from coreason_aem_client.domain.response import Response
from coreason_aem_client.operations import ResponseSpec
from coreason_aem_client.parsers import HANDLERS
from coreason_aem_client.parsers.simple import json_package_filter, simple, simple_false, simple_true


def test_simple_handlers() -> None:
    """Test templated messages and boolean data."""
    spec = ResponseSpec("simple", "Flush agent {name} exists on {run_mode}")
    params = {"name": "f1", "run_mode": "author"}

    result = simple(Response(200), spec, params)
    assert result.message == "Flush agent f1 exists on author"
    assert result.data is None
    assert result.response is not None
    assert result.response.status_code == 200

    assert simple_true(Response(200), spec, params).data is True
    assert simple_false(Response(404), spec, params).data is False


def test_simple_success_from_spec() -> None:
    """Test that success is taken from the response spec."""
    spec = ResponseSpec("simple", "failed", success=False)
    assert simple(Response(200), spec, {}).is_success() is False


def test_json_package_filter_from_text() -> None:
    """Test that filter roots are collected in body order."""
    body = json.dumps(
        {
            "jcr:primaryType": "nt:unstructured",
            "f0": {"jcr:primaryType": "nt:unstructured", "root": "/apps/geometrixx", "rules": []},
            "f1": {"jcr:primaryType": "nt:unstructured", "root": "/apps/geometrixx-common", "rules": []},
            "f2": {"jcr:primaryType": "nt:unstructured"},
        }
    )
    spec = ResponseSpec("json_package_filter", "Filter retrieved successfully")
    result = json_package_filter(Response(200, body), spec, {})

    assert result.data == ["/apps/geometrixx", "/apps/geometrixx-common"]
    assert result.is_success() is True


def test_json_package_filter_decoded_and_empty_bodies() -> None:
    """Test already-decoded and empty bodies."""
    spec = ResponseSpec("json_package_filter", "Filter retrieved successfully")
    assert json_package_filter(Response(200, {"f0": {"root": "/content"}}), spec, {}).data == ["/content"]
    assert json_package_filter(Response(200, b""), spec, {}).data == []


def test_handler_registry() -> None:
    """Test that every declared handler name is registered."""
    from coreason_aem_client.operations import OPERATION_SPECS

    for spec in OPERATION_SPECS.values():
        for response_spec in spec.responses.values():
            assert response_spec.handler in HANDLERS
