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
Coreason AEM Client: lifecycle management for Adobe Experience Manager packages and agents.
"""

from .client import Client, Transport
from .config import Settings, get_settings
from .convergence import converge
from .domain import PackageIdentity, Response, Result, RetryPolicy
from .events import (
    CheckProgress,
    ClientEvent,
    CompositeEmitter,
    EventCollector,
    EventEmitter,
    EventType,
    LoguruEmitter,
)
from .exceptions import (
    AemClientError,
    ConvergenceError,
    OperationError,
    ResponseParseError,
    TransportError,
    UnexpectedResponseError,
    UnknownOperationError,
)
from .operations import OPERATION_SPECS, OperationKind, OperationSpec, ResponseSpec
from .resources import FlushAgent, Package, Path, Repository, User

__all__ = [
    "Client",
    "Transport",
    "Settings",
    "get_settings",
    "converge",
    "PackageIdentity",
    "Response",
    "Result",
    "RetryPolicy",
    "CheckProgress",
    "ClientEvent",
    "CompositeEmitter",
    "EventCollector",
    "EventEmitter",
    "EventType",
    "LoguruEmitter",
    "AemClientError",
    "ConvergenceError",
    "OperationError",
    "ResponseParseError",
    "TransportError",
    "UnexpectedResponseError",
    "UnknownOperationError",
    "OPERATION_SPECS",
    "OperationKind",
    "OperationSpec",
    "ResponseSpec",
    "FlushAgent",
    "Package",
    "Path",
    "Repository",
    "User",
]
