"""TCP servers that encipher or decipher "text@key" requests."""

from __future__ import annotations

import enum
import re
import socketserver
import sys
from collections.abc import Sequence

from otpad.cipher import CipherError, decrypt, encrypt

BUFFER_SIZE = 100000
MAX_CONCURRENT_CONNECTIONS = 5

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Mode(enum.Enum):
    """What a server does with the text it receives."""

    ENCRYPT = "enc"
    DECRYPT = "dec"


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def split_request(data: str) -> tuple[str, str]:
    """Split a request into its text and key, skipping empty fields between '@'."""
    fields = [field for field in data.split("@") if field]
    if not fields:
        raise CipherError("Invalid input")
    if len(fields) < 2:
        raise CipherError("Invalid key")
    return fields[0], fields[1]


def handle_request(data: bytes, mode: Mode) -> bytes:
    """Return the bytes a server in the given mode answers to a request.

    An encryption request with characters outside the alphabet gets no answer
    at all, so the result is empty.
    """
    text = data.split(b"\0", 1)[0].decode("latin-1")
    try:
        body, key = split_request(text)
    except CipherError as exc:
        return f"ERROR: {exc}".encode("ascii")
    if len(key) < len(body):
        return b"ERROR: Key too short"
    if mode is Mode.ENCRYPT:
        try:
            return encrypt(body, key).encode("ascii")
        except CipherError as exc:
            print(f"SERVER: ERROR - {exc}", file=sys.stderr)
            return b""
    try:
        return decrypt(body, key).encode("ascii")
    except CipherError as exc:
        return f"ERROR: {exc}".encode("ascii")


class CipherRequestHandler(socketserver.BaseRequestHandler):
    """Answer one request on a connection, then close it."""

    def handle(self) -> None:
        try:
            data = self.request.recv(BUFFER_SIZE - 1)
        except OSError as exc:
            print(f"ERROR reading from socket: {exc}", file=sys.stderr)
            return
        response = handle_request(data, self.server.mode)
        if not response:
            return
        try:
            self.request.sendall(response)
        except OSError as exc:
            print(f"ERROR writing to socket: {exc}", file=sys.stderr)


class CipherServer(socketserver.ThreadingMixIn, socketserver.TCPServer):
    """A TCP server that handles each connection on its own thread."""

    daemon_threads = True
    request_queue_size = MAX_CONCURRENT_CONNECTIONS

    def __init__(self, server_address: tuple[str, int], mode: Mode) -> None:
        self.mode = mode
        super().__init__(server_address, CipherRequestHandler)


def make_server(port: int, mode: Mode, host: str = "") -> CipherServer:
    """Create a server bound to the given port on all addresses by default."""
    return CipherServer((host, port), mode)


def serve(port: int, mode: Mode) -> None:
    """Serve requests on the given port until interrupted."""
    with make_server(port, mode) as server:
        server.serve_forever()


def _main(argv: Sequence[str] | None, mode: Mode, name: str) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 1:
        print(f"USAGE: {name} port", file=sys.stderr)
        return 1
    try:
        serve(_leading_int(args[0]), mode)
    except OSError as exc:
        print(f"ERROR on binding: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


def enc_main(argv: Sequence[str] | None = None) -> int:
    """Run the encryption server on the port given as the first argument."""
    return _main(argv, Mode.ENCRYPT, "enc_server")


def dec_main(argv: Sequence[str] | None = None) -> int:
    """Run the decryption server on the port given as the first argument."""
    return _main(argv, Mode.DECRYPT, "dec_server")