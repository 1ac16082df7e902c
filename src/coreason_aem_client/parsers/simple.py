"""
Response handlers that need no markup parsing.
"""

import json
from typing import Any, List, Mapping

from coreason_aem_client.domain.response import Response, Result
from coreason_aem_client.operations import ResponseSpec
from coreason_aem_client.parsers.markup import as_text, format_message


def simple(response: Response, response_spec: ResponseSpec, call_params: Mapping[str, Any]) -> Result:
    return Result(
        message=format_message(response_spec.message, call_params),
        response=response,
        success=response_spec.success,
    )


def simple_true(response: Response, response_spec: ResponseSpec, call_params: Mapping[str, Any]) -> Result:
    return Result(
        message=format_message(response_spec.message, call_params),
        response=response,
        data=True,
        success=response_spec.success,
    )


def simple_false(response: Response, response_spec: ResponseSpec, call_params: Mapping[str, Any]) -> Result:
    return Result(
        message=format_message(response_spec.message, call_params),
        response=response,
        data=False,
        success=response_spec.success,
    )


def json_package_filter(response: Response, response_spec: ResponseSpec, call_params: Mapping[str, Any]) -> Result:
    """
    Collects the filter root paths of a package definition.

    The body is a JSON object keyed by filter node name, e.g.
    {"jcr:primaryType": "nt:unstructured", "f0": {"root": "/apps/geometrixx", "rules": []}}.
    Result data is the list of roots in body order.
    """
    body = response.body
    if not isinstance(body, Mapping):
        text = as_text(body)
        body = json.loads(text) if text.strip() else {}

    filter_paths: List[str] = []
    for value in body.values():
        if isinstance(value, Mapping) and value.get("root") is not None:
            filter_paths.append(str(value["root"]))

    return Result(
        message=format_message(response_spec.message, call_params),
        response=response,
        data=filter_paths,
        success=response_spec.success,
    )
