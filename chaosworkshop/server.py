"""The HTTP server: request logging, dispatch and startup."""

import argparse
import email.parser
import email.policy
import ssl
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qsl, urlsplit

from chaosworkshop.colors import Color, colorize, log
from chaosworkshop.datafiles import does_file_exist, get_data_root
from chaosworkshop.endpoint import EndpointRegistry, Response
from chaosworkshop.endpoint import registry as _default_registry
from chaosworkshop.options import Options, OptionsError, load_options

_SEPARATOR = "-----------------------------------------"
_TIME_FORMAT = "%d-%m-%Y %H:%M:%S"


@dataclass
class Request:
    """An incoming HTTP request."""

    method: str
    path: str
    requestor: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    args: dict[str, str | bytes] = field(default_factory=dict)
    querystring: str = ""
    content: bytes = b""


def _text(value: str | bytes) -> str:
    return value.decode("utf-8", errors="replace") if isinstance(value, bytes) else value


def _pairs(pairs: Mapping[str, str | bytes], key_color: Color) -> str:
    return " | ".join(
        f"{key_color.value}{key}: {Color.GREEN.value}{_text(value)}{Color.RESET.value}"
        for key, value in pairs.items()
    )


def format_request_log(request: Request, now: datetime) -> str:
    """Return the coloured log entry for ``request`` received at ``now``."""
    lines = [
        _SEPARATOR,
        f"Time: {colorize(now.strftime(_TIME_FORMAT), Color.CYAN)}",
        f"Received {Color.RED.value}{request.method} {Color.RESET.value}"
        f"{request.path} ({request.requestor})",
    ]
    if request.headers:
        lines.append(f"Headers: {_pairs(request.headers, Color.YELLOW)}{Color.RESET.value}")
    if request.args:
        lines.append(f"Args: {_pairs(request.args, Color.MAGENTA)}{Color.RESET.value}")
    if request.querystring:
        lines.append(f"Query: {colorize(request.querystring, Color.BLUE)}")
    if request.content:
        lines.append(f"Content: {colorize(_text(request.content), Color.YELLOW)}")
    return "\n".join(lines) + "\n"


def dispatch(registry: EndpointRegistry, request: Request) -> Response:
    """Run the handler for the request, or answer 404 if there is none."""
    handler = registry.resolve(request.method, request.path)
    if handler is None:
        return Response(status=404)
    return handler(request)


def _parse_multipart(content_type: str, content: bytes) -> dict[str, str | bytes]:
    message = email.parser.BytesParser(policy=email.policy.HTTP).parsebytes(
        b"Content-Type: " + content_type.encode("latin-1") + b"\r\n\r\n" + content
    )
    args: dict[str, str | bytes] = {}
    if not message.is_multipart():
        return args
    for part in message.iter_parts():
        name = part.get_param("name", header="content-disposition")
        if not name or name in args:
            continue
        payload = part.get_payload(decode=True) or b""
        if part.get_filename() is None:
            args[name] = payload.decode("utf-8", errors="replace")
        else:
            args[name] = payload
    return args


def _parse_args(query: str, content_type: str, content: bytes) -> dict[str, str | bytes]:
    args: dict[str, str | bytes] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        args.setdefault(key, value)
    mime = content_type.split(";", 1)[0].strip().lower()
    if mime == "application/x-www-form-urlencoded":
        for key, value in parse_qsl(content.decode("utf-8", errors="replace"), keep_blank_values=True):
            args.setdefault(key, value)
    elif mime == "multipart/form-data":
        for key, value in _parse_multipart(content_type, content).items():
            args.setdefault(key, value)
    return args


def _make_handler(registry: EndpointRegistry, timeout: float | None) -> type:
    class _Handler(BaseHTTPRequestHandler):
        protocol_version = "HTTP/1.1"

        def do_GET(self) -> None:
            self._handle("GET")

        def do_POST(self) -> None:
            self._handle("POST")

        def log_message(self, format: str, *args: object) -> None:
            pass

        def _handle(self, method: str) -> None:
            url = urlsplit(self.path)
            length = int(self.headers.get("Content-Length") or 0)
            content = self.rfile.read(length) if length > 0 else b""
            request = Request(
                method=method,
                path=url.path,
                requestor=self.client_address[0],
                headers=dict(self.headers.items()),
                args=_parse_args(url.query, self.headers.get("Content-Type", ""), content),
                querystring=url.query,
                content=content,
            )
            log(format_request_log(request, datetime.now()))
            try:
                response = dispatch(registry, request)
            except Exception as error:  # a failing handler must not kill the connection
                log(colorize(f"Handler error: {error}", Color.RED))
                response = Response(status=500)
            body = response.body.encode("utf-8") if isinstance(response.body, str) else response.body
            self.send_response(response.status)
            self.send_header("Content-Type", response.content_type)
            for name, value in response.headers.items():
                self.send_header(name, value)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

    _Handler.timeout = timeout
    return _Handler


def create_server(options: Options, registry: EndpointRegistry) -> ThreadingHTTPServer:
    """Create a threaded server on the configured port, with TLS if enabled.

    Raises FileNotFoundError if TLS is on and cert.pem or key.pem is missing
    from the data root.
    """
    if options.use_tls and not (does_file_exist("cert.pem") and does_file_exist("key.pem")):
        raise FileNotFoundError("No cert.pem or key.pem files found in DATA_ROOT path")
    handler = _make_handler(registry, options.connection_timeout or None)
    server = ThreadingHTTPServer(("", options.port), handler)
    server.daemon_threads = True
    if options.use_tls:
        root = get_data_root()
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
        context.load_cert_chain(root + "cert.pem", root + "key.pem")
        server.socket = context.wrap_socket(server.socket, server_side=True)
    return server


def main(argv: list[str] | None = None) -> int:
    """Read the options and serve until interrupted."""
    parser = argparse.ArgumentParser(prog="chaosworkshop", description="Run the workshop server.")
    parser.parse_args(argv)
    try:
        options = load_options()
    except OptionsError as error:
        log(colorize(f"ERROR: {error}", Color.RED))
        return 1
    try:
        server = create_server(options, _default_registry)
    except FileNotFoundError as error:
        log(colorize(f"{error}, aborting (set use_tls to false to disable)", Color.RED))
        return 1
    log(f"\n\n{Color.GREEN.value}Starting http server on port {options.port}\n{Color.WHITE.value}")
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0