# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_aem_client

from typing import Any, Dict, Mapping, Optional, Protocol

from coreason_aem_client.config import Settings, get_settings
from coreason_aem_client.domain.response import Response, Result
from coreason_aem_client.events import ClientEvent, EventEmitter, EventType, LoguruEmitter
from coreason_aem_client.exceptions import UnexpectedResponseError, UnknownOperationError
from coreason_aem_client.operations import OPERATION_SPECS, OperationKind, OperationSpec
from coreason_aem_client.parsers import HANDLERS
from coreason_aem_client.utils.logger import logger


class Transport(Protocol):
    """HTTP layer that knows the URL, method and authentication of every AEM operation."""

    def call(self, resource: str, operation: str, params: Mapping[str, Any]) -> Response:
        """
        Executes one AEM API call.

        Args:
            resource: Resource kind, e.g. "package".
            operation: Operation name, e.g. "install".
            params: Operation-specific parameters.

        Returns:
            The raw Response.

        Raises:
            TransportError: If the request could not be completed.
        """
        ...  # pragma: no cover


class Client:
    """
    Dispatches AEM operations through a transport and turns responses into Results.
    """

    def __init__(
        self,
        transport: Transport,
        settings: Optional[Settings] = None,
        event_emitter: Optional[EventEmitter] = None,
        specs: Optional[Mapping[OperationKind, OperationSpec]] = None,
    ) -> None:
        self.transport = transport
        self.settings = settings or get_settings()
        self.event_emitter = event_emitter or LoguruEmitter()
        self.specs = specs if specs is not None else OPERATION_SPECS

    def call(self, kind: OperationKind, params: Optional[Mapping[str, Any]] = None) -> Result:
        """
        Calls an AEM operation and handles its response as declared for the returned status code.

        Raises:
            UnknownOperationError: If the operation has no declared specification.
            UnexpectedResponseError: If the status code is not declared for the operation.
            TransportError: Propagated unchanged from the transport.
        """
        spec = self.specs.get(kind)
        if spec is None:
            raise UnknownOperationError(f"No specification declared for operation {kind.resource}.{kind.action}")

        call_params: Dict[str, Any] = dict(params or {})
        logger.debug(f"Calling {kind.resource}.{kind.action} with {sorted(call_params)}")
        self.event_emitter.emit(
            ClientEvent(
                type=EventType.OPERATION_CALL,
                message=f"Calling {kind.resource}.{kind.action}",
                payload={"resource": kind.resource, "action": kind.action},
            )
        )

        response = self.transport.call(kind.resource, kind.action, call_params)

        response_spec = spec.responses.get(response.status_code)
        if response_spec is None:
            message = (
                f"Unexpected response from {kind.resource}.{kind.action}\n"
                f"status code: {response.status_code}\n"
                f"body: {response.body}"
            )
            logger.error(message)
            result = Result(message=message, response=response, success=False)
            self.event_emitter.emit(
                ClientEvent(
                    type=EventType.ERROR,
                    message=message,
                    payload={"resource": kind.resource, "action": kind.action, "status_code": response.status_code},
                )
            )
            raise UnexpectedResponseError(message, result)

        result = HANDLERS[response_spec.handler](response, response_spec, call_params)
        self.event_emitter.emit(
            ClientEvent(
                type=EventType.OPERATION_RESULT,
                message=result.message,
                payload={
                    "resource": kind.resource,
                    "action": kind.action,
                    "status_code": response.status_code,
                    "success": result.is_success(),
                },
            )
        )
        return result
