from typing import Any, Callable, Dict, Mapping

from coreason_aem_client.domain.response import Response, Result
from coreason_aem_client.operations import ResponseSpec

from .html import html_authorizable_id, html_change_password, html_package_service_allow_error
from .markup import sanitize_html
from .simple import json_package_filter, simple, simple_false, simple_true
from .xml import xml_package_list

ResponseHandler = Callable[[Response, ResponseSpec, Mapping[str, Any]], Result]

HANDLERS: Dict[str, ResponseHandler] = {
    "simple": simple,
    "simple_true": simple_true,
    "simple_false": simple_false,
    "json_package_filter": json_package_filter,
    "html_authorizable_id": html_authorizable_id,
    "html_package_service_allow_error": html_package_service_allow_error,
    "html_change_password": html_change_password,
    "xml_package_list": xml_package_list,
}

__all__ = [
    "HANDLERS",
    "ResponseHandler",
    "html_authorizable_id",
    "html_change_password",
    "html_package_service_allow_error",
    "json_package_filter",
    "sanitize_html",
    "simple",
    "simple_false",
    "simple_true",
    "xml_package_list",
]
