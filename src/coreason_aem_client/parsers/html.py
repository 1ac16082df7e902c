"""
Response handlers for HTML payloads.
"""

import re
from typing import Any, Mapping

from coreason_aem_client.domain.response import Response, Result
from coreason_aem_client.exceptions import OperationError, ResponseParseError
from coreason_aem_client.operations import ResponseSpec
from coreason_aem_client.parsers.markup import (
    as_text,
    find_first,
    first_text,
    format_message,
    parse_markup,
    sanitize_html,
)

CHANGE_PASSWORD_SUCCESS = "Password successfully changed."


def html_authorizable_id(response: Response, response_spec: ResponseSpec, call_params: Mapping[str, Any]) -> Result:
    """
    Parses the authorizable ID of a newly created user or group from the page title.

    Result data is the authorizable ID.
    """
    sanitized_body = sanitize_html(as_text(response.body), r'<img.+">', "")
    html = parse_markup(sanitized_body)

    title = find_first(html, "title")
    if title is None:
        return Result(
            message="Unable to find authorizable ID, response has no title",
            response=response,
            data="",
            success=False,
        )

    authorizable_id = (title.text or "").replace(f"Content created {call_params.get('path', '')}", "", 1)
    authorizable_id = re.sub(r"^/", "", authorizable_id, count=1)

    params = {**call_params, "authorizable_id": authorizable_id}
    return Result(
        message=format_message(response_spec.message, params),
        response=response,
        data=authorizable_id,
        success=response_spec.success,
    )


def html_package_service_allow_error(
    response: Response, response_spec: ResponseSpec, call_params: Mapping[str, Any]
) -> Result:
    """
    Parses the error page AEM returns while installing hotfixes, service packs and feature packs.
    AEM can respond with error 500 while still processing the installation, so the
    caller judges the outcome from the message.
    """
    html = parse_markup(as_text(response.body))
    params = {
        **call_params,
        "title": first_text(html, "title"),
        "desc": first_text(html, "p"),
        "reason": first_text(html, "pre"),
    }
    return Result(
        message=format_message(response_spec.message, params),
        response=response,
        success=response_spec.success,
    )


def html_change_password(response: Response, response_spec: ResponseSpec, call_params: Mapping[str, Any]) -> Result:
    """
    Checks the change password page for the success indicator.

    Raises:
        ResponseParseError: If the body is blank, which means the user does not exist.
        OperationError: If the page reports anything other than success.
    """
    body = as_text(response.body)
    if not body.strip():
        message = "Failed to change password: Response body is empty, user likely does not exist."
        raise ResponseParseError(message, Result(message=message, response=response, success=False))

    sanitized_body = sanitize_html(body, r"<input.+>", "")
    sanitized_body = sanitize_html(sanitized_body, r"< 0", "&lt; 0")
    html = parse_markup(sanitized_body)
    user = first_text(html, "body/div/table/tr/td/b")
    desc = first_text(html, "body/div/table/tr/td/font")

    if desc != CHANGE_PASSWORD_SUCCESS:
        if not desc:
            desc = "Failed to change password: Response page has no status message."
        raise OperationError(desc, Result(message=desc, response=response, success=False))

    params = {**call_params, "user": user}
    return Result(
        message=format_message(response_spec.message, params),
        response=response,
        success=response_spec.success,
    )
