"""Types used in the JSON-RPC request/response protocol."""

from typing import Any, List

from pydantic import Field

from web3_base_types import CamelModel
from web3_exceptions import RPCError


class Request(CamelModel):
    """
    A single JSON-RPC call.

    Parameters are attached after construction with `set_params`; they may be
    plain JSON values or web3 models and value types, which are rendered to
    their wire form when the request is encoded.
    """

    jsonrpc: str = "2.0"
    method: str
    params: List[Any] = Field(default_factory=list)
    id: int

    def set_params(self, *params: Any) -> "Request":
        """Replace the parameters of the request and return it for chaining."""
        self.params = list(params)
        return self


class ErrorObject(CamelModel):
    """Error member of a JSON-RPC response."""

    code: int
    message: str = ""
    data: Any = None

    def to_exception(self) -> RPCError:
        """Return the exception raised for this error."""
        return RPCError(self.code, self.message, self.data)


class Response(CamelModel):
    """
    A JSON-RPC response.

    `result` holds the raw JSON value; use the `decode_*` functions of
    `web3_types` to turn it into a domain record.
    """

    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: Any = None
    error: ErrorObject | None = None

    @property
    def is_error(self) -> bool:
        """Whether the node answered with an error object."""
        return self.error is not None

    def get_result(self) -> Any:
        """Return the result, raising `RPCError` if the node answered with an error."""
        if self.error is not None:
            raise self.error.to_exception()
        return self.result
