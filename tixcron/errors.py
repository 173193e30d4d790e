"""Standard application errors and their translation to HTTP and RPC replies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from tixcron.constants import RpcCode


class ErrorStd(Exception):
    """An error carrying an HTTP status, an RPC status code and a message."""

    def __init__(self, http_status_code: int, rpc_status_code: str, message: str):
        super().__init__(message)
        self.http_status_code = int(http_status_code)
        self.rpc_status_code = str(rpc_status_code)
        self.message = message

    def error_code(self) -> str:
        """HTTP status followed by the RPC code, e.g. ``"50013"``."""
        return f"{self.http_status_code}{self.rpc_status_code}"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class FieldError:
    """A single failed validation rule on one field."""

    field: str
    tag: str
    param: str = ""


class ValidationErrors(Exception):
    """A collection of field validation failures."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors = tuple(errors)
        super().__init__("; ".join(f"{e.field}: {e.tag}" for e in self.errors))

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)


def _find_error_std(err: BaseException | None) -> ErrorStd | None:
    seen = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, ErrorStd):
            return err
        seen.add(id(err))
        err = err.__cause__ or err.__context__
    return None


def http_error_response(err: BaseException) -> tuple[int, dict[str, str]] | None:
    """Map an error to ``(status, body)`` for an HTTP reply, or ``None`` if unhandled."""
    if isinstance(err, ValidationErrors):
        for field_error in err:
            if field_error.tag.lower() == "required":
                return 400, {
                    "status_code": RpcCode.INVALID_ARGUMENT.value,
                    "message": f"{field_error.field.lower()} is required",
                }

    std = _find_error_std(err)
    if std is not None:
        return std.http_status_code, {
            "status_code": std.error_code(),
            "message": str(std).lower(),
        }
    return None


def rpc_error_details(err: BaseException) -> tuple[int, str, str]:
    """Map an error to ``(http_status, rpc_code, message)``; zero values if unhandled."""
    if isinstance(err, ValidationErrors):
        for field_error in err:
            tag = field_error.tag.lower()
            field = field_error.field.lower()
            if tag == "required":
                return 400, "15", f"{field} is required"
            if tag == "min":
                return 400, "15", f"{field} minimum value is {field_error.param.lower()}"

    std = _find_error_std(err)
    if std is not None:
        return std.http_status_code, std.rpc_status_code, std.message
    return 0, "", ""