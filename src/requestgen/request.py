"""The request descriptor handed from a generator to the benchmarker."""

from dataclasses import dataclass
import enum
from typing import Optional


class Method(enum.Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass
class RequestDescriptor:
    """One HTTP request for the benchmarker to issue.

    ``data`` is the request body, either form-encoded or raw.
    """

    method: Method
    uri: str
    data: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "method": self.method.name.lower(),
            "uri": self.uri,
            "data": self.data,
        }


def validate(request: RequestDescriptor):
    if not isinstance(request.method, Method):
        raise ValueError(f"method must be a Method, not {request.method!r}")
    if not request.uri:
        raise ValueError("uri is not specified")
    if request.data is not None and not isinstance(request.data, str):
        raise ValueError("data must be a string if it is set")
