"""
Response handlers for XML payloads.
"""

from typing import Any, Mapping

from coreason_aem_client.domain.response import Response, Result
from coreason_aem_client.operations import ResponseSpec
from coreason_aem_client.parsers.markup import as_text, find_first, first_text, format_message, parse_markup


def xml_package_list(response: Response, response_spec: ResponseSpec, call_params: Mapping[str, Any]) -> Result:
    """
    Handles the package manager list XML, keeping only the packages subtree.

    Result data is the <packages> element, left unflattened for downstream queries.
    """
    xml = parse_markup(as_text(response.body))

    status = find_first(xml, "crx/response/status")
    status_code = status.get("code", "") if status is not None else ""
    status_text = first_text(xml, "crx/response/status")

    if status_code == "200" and status_text == "ok":
        return Result(
            message=format_message(response_spec.message, call_params),
            response=response,
            data=find_first(xml, "crx/response/data/packages"),
            success=True,
        )

    return Result(
        message=(
            "Unable to retrieve package list, getting status code "
            f"{status_code} and status text {status_text}"
        ),
        response=response,
        success=False,
    )
