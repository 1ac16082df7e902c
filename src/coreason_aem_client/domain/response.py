from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union
from xml.etree.ElementTree import Element


@dataclass(frozen=True)
class Response:
    """Raw HTTP response returned by a transport."""

    status_code: int
    body: Any = ""
    headers: Mapping[str, str] = field(default_factory=dict)


# Closed set of payloads a Result can carry; each operation documents which one it uses.
ResultData = Union[None, bool, int, str, List[str], List["Result"], Element]


@dataclass(frozen=True)
class Result:
    """
    Outcome of a single client operation.

    `response` is None for results derived from other calls (existence checks, convergence).
    `success` is decided by the response handler, not by the HTTP status alone.
    """

    message: str
    response: Optional[Response] = None
    data: ResultData = None
    success: bool = True

    def is_success(self) -> bool:
        return self.success
