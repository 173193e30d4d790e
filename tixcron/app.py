"""Command-line entry point: wires storage, provider and scheduler, then serves HTTP."""

from __future__ import annotations

import argparse
import os
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Optional, Sequence

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from tixcron.cmd import Cmd
from tixcron.constants import RpcCode
from tixcron.errors import ErrorStd
from tixcron.flight_providers import FlightProvider, provider_address
from tixcron.logutil import log_error
from tixcron.models import RequestAfterBook
from tixcron.psql import Psql
from tixcron.transaction import ExpiryService

SERVICE_NAME = "CronJob"


def build_service(dsn: str, flight_client: Any) -> ExpiryService:
    """Create the expiry service over the database at ``dsn`` and the given RPC client."""
    try:
        engine = create_engine(dsn)
    except (SQLAlchemyError, ImportError, ValueError) as err:
        log_error(err)
        raise ErrorStd(
            500, RpcCode.INTERNAL.value, "database can't connected, please check"
        ) from err
    return ExpiryService(Psql(engine), FlightProvider(flight_client))


class _UnboundFlightClient:
    """Cancellation client for an address with no RPC method bound to it."""

    def __init__(self, address: str):
        self.address = address

    def flight_cancel_booking(self, request: RequestAfterBook) -> Any:
        raise ConnectionError(f"no flight cancellation RPC bound for {self.address}")


class _NotFoundHandler(BaseHTTPRequestHandler):
    def _not_found(self) -> None:
        body = f"Cannot {self.command} {self.path}".encode("utf-8")
        self.send_response(404)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = _not_found

    def log_message(self, format: str, *args: Any) -> None:
        pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the expiry scheduler and keep serving until interrupted."""
    parser = argparse.ArgumentParser(prog="tixcron", description=f"{SERVICE_NAME} service")
    parser.add_argument("--env-file", default=".env", help="environment file to load")
    args = parser.parse_args(argv)

    load_dotenv(args.env_file)

    address = provider_address(
        os.environ.get("RPC_CORE_SERVICE_HOST", ""),
        os.environ.get("RPC_CORE_SERVICE_PORT", ""),
    )
    try:
        service = build_service(
            os.environ.get("DB_TRANSACTION_DSN", ""), _UnboundFlightClient(address)
        )
    except ErrorStd as err:
        log_error(err)
        return 1

    Cmd(service).do_expired()

    host = os.environ.get("APP_HOST", "")
    port = os.environ.get("APP_PORT", "")
    try:
        with ThreadingHTTPServer((host, int(port or 0)), _NotFoundHandler) as server:
            server.serve_forever()
    except KeyboardInterrupt:
        pass
    except (OSError, ValueError) as err:
        log_error(err)
        return 1
    finally:
        service.stop()
    return 0