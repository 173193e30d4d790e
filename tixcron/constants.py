"""Shared message, status-code and transaction-status constants."""

from enum import Enum


class _StrConstant(str, Enum):
    """String enum whose str() is its plain value."""

    __str__ = str.__str__
    __format__ = str.__format__


class HttpMessage(_StrConstant):
    """Standard human-readable HTTP messages."""

    OK = "ok"
    BAD_REQUEST = "bad request"
    INTERNAL_SERVER_ERROR = "internal server error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not found"
    METHOD_NOT_ALLOWED = "method not allowed"
    CONFLICT = "conflict"
    TOO_MANY_REQUESTS = "too many requests"
    UNPROCESSABLE_ENTITY = "unprocessable entity"


class RpcCode(_StrConstant):
    """Two-digit RPC status codes."""

    OK = "00"
    CANCELLED = "01"
    UNKNOWN = "02"
    INVALID_ARGUMENT = "03"
    DEADLINE_EXCEEDED = "04"
    NOT_FOUND = "05"
    ALREADY_EXISTS = "06"
    PERMISSION_DENIED = "07"
    RESOURCE_EXHAUSTED = "08"
    FAILED_PRECONDITION = "09"
    ABORTED = "10"
    OUT_OF_RANGE = "11"
    UNIMPLEMENTED = "12"
    INTERNAL = "13"
    UNAVAILABLE = "14"
    DATA_LOSS = "15"
    BILLING_DISABLED = "16"
    BILLING_STATUS_UNAVAILABLE = "17"
    BILLING_UNSPECIFIED_ERROR = "18"


class TransactionStatus(_StrConstant):
    """Lifecycle states of a booking transaction."""

    EXPIRED = "EXPIRED"
    BOOKED = "BOOKED"
    INITIATED = "INITIATED"