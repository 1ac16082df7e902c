# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_aem_client

"""
Declarative table of the AEM operations this client issues.

Each OperationKind maps to the response handler and message template to use for every
HTTP status code AEM is expected to return. Templates are filled from the call parameters.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class OperationKind(Enum):
    PACKAGE_CREATE = ("package", "create")
    PACKAGE_UPDATE = ("package", "update")
    PACKAGE_DELETE = ("package", "delete")
    PACKAGE_BUILD = ("package", "build")
    PACKAGE_INSTALL = ("package", "install")
    PACKAGE_UNINSTALL = ("package", "uninstall")
    PACKAGE_REPLICATE = ("package", "replicate")
    PACKAGE_DOWNLOAD = ("package", "download")
    PACKAGE_UPLOAD = ("package", "upload")
    PACKAGE_GET_FILTER = ("package", "get_filter")
    PACKAGE_LIST_ALL = ("package", "list_all")
    PATH_ACTIVATE = ("path", "activate")
    REPOSITORY_BLOCK_WRITES = ("repository", "block_writes")
    REPOSITORY_UNBLOCK_WRITES = ("repository", "unblock_writes")
    FLUSH_AGENT_CREATE_UPDATE = ("flush_agent", "create_update")
    FLUSH_AGENT_DELETE = ("flush_agent", "delete")
    FLUSH_AGENT_EXISTS = ("flush_agent", "exists")
    USER_CREATE = ("user", "create")
    USER_CHANGE_PASSWORD = ("user", "change_password")

    @property
    def resource(self) -> str:
        return self.value[0]

    @property
    def action(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class ResponseSpec:
    """How to interpret one expected status code."""

    handler: str
    message: str
    success: bool = True


@dataclass(frozen=True)
class OperationSpec:
    responses: Dict[int, ResponseSpec] = field(default_factory=dict)


_PACKAGE = "Package {group_name}/{package_name}-{package_version}"


def _ok(message: str) -> OperationSpec:
    return OperationSpec(responses={200: ResponseSpec("simple", message)})


OPERATION_SPECS: Dict[OperationKind, OperationSpec] = {
    OperationKind.PACKAGE_CREATE: _ok(f"{_PACKAGE} created"),
    OperationKind.PACKAGE_UPDATE: _ok(f"{_PACKAGE} updated"),
    OperationKind.PACKAGE_DELETE: _ok(f"{_PACKAGE} deleted"),
    OperationKind.PACKAGE_BUILD: _ok(f"{_PACKAGE} built"),
    OperationKind.PACKAGE_INSTALL: OperationSpec(
        responses={
            200: ResponseSpec("simple", f"{_PACKAGE} installed"),
            # AEM may still be installing hotfixes and service packs behind a 500
            500: ResponseSpec(
                "html_package_service_allow_error",
                f"{_PACKAGE} install returned an error - {{title}} - {{desc}} - {{reason}}",
            ),
        }
    ),
    OperationKind.PACKAGE_UNINSTALL: _ok(f"{_PACKAGE} uninstalled"),
    OperationKind.PACKAGE_REPLICATE: _ok(f"{_PACKAGE} replicated"),
    OperationKind.PACKAGE_DOWNLOAD: _ok(f"{_PACKAGE} downloaded to {{file_path}}"),
    OperationKind.PACKAGE_UPLOAD: _ok(f"{_PACKAGE} uploaded"),
    OperationKind.PACKAGE_GET_FILTER: OperationSpec(
        responses={200: ResponseSpec("json_package_filter", f"Filter retrieved successfully for {_PACKAGE}")}
    ),
    OperationKind.PACKAGE_LIST_ALL: OperationSpec(
        responses={200: ResponseSpec("xml_package_list", "All packages list retrieved successfully")}
    ),
    OperationKind.PATH_ACTIVATE: _ok("Path {name} activated"),
    OperationKind.REPOSITORY_BLOCK_WRITES: _ok("Repository writes blocked"),
    OperationKind.REPOSITORY_UNBLOCK_WRITES: _ok("Repository writes unblocked"),
    OperationKind.FLUSH_AGENT_CREATE_UPDATE: OperationSpec(
        responses={
            200: ResponseSpec("simple", "Flush agent {name} updated on {run_mode}"),
            201: ResponseSpec("simple", "Flush agent {name} created on {run_mode}"),
        }
    ),
    OperationKind.FLUSH_AGENT_DELETE: OperationSpec(
        responses={
            200: ResponseSpec("simple", "Flush agent {name} deleted on {run_mode}"),
            404: ResponseSpec("simple", "Flush agent {name} not found on {run_mode}"),
        }
    ),
    OperationKind.FLUSH_AGENT_EXISTS: OperationSpec(
        responses={
            200: ResponseSpec("simple_true", "Flush agent {name} exists on {run_mode}"),
            404: ResponseSpec("simple_false", "Flush agent {name} not found on {run_mode}"),
        }
    ),
    OperationKind.USER_CREATE: OperationSpec(
        responses={201: ResponseSpec("html_authorizable_id", "User {name} created at {path}/{authorizable_id}")}
    ),
    OperationKind.USER_CHANGE_PASSWORD: OperationSpec(
        responses={200: ResponseSpec("html_change_password", "User {user}'s password has been changed")}
    ),
}
