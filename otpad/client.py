"""Clients that send text and key to a cipher server and print the answer."""

from __future__ import annotations

import re
import socket
import sys
from collections.abc import Sequence

from otpad.cipher import CipherError, validate_text

BUFFER_SIZE = 100000
DEFAULT_HOST = "localhost"
_HOSTNAME_LIMIT = 99

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ClientError(Exception):
    """Raised when a client cannot build, send or receive its request."""


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _read(path: str) -> str:
    try:
        with open(path, "rb") as handle:
            data = handle.read(BUFFER_SIZE - 1)
    except OSError:
        raise ClientError(f"ERROR opening file {path}") from None
    if not data:
        raise ClientError(f"ERROR reading file {path}")
    return data.split(b"\0", 1)[0].decode("latin-1")


def read_plaintext_file(path: str) -> str:
    """Read a plaintext or key file, dropping trailing newlines and spaces."""
    return _read(path).rstrip("\n\r ")


def read_ciphertext_file(path: str) -> str:
    """Read a ciphertext or key file up to its first newline."""
    return _read(path).split("\n", 1)[0]


def validate_plaintext(text: str) -> None:
    """Reject plaintext holding anything but letters and spaces."""
    try:
        validate_text(text)
    except CipherError:
        bad = next(char for char in text if char != " " and not _is_ascii_letter(char))
        raise ClientError(f"ERROR - invalid character in plaintext: '{bad}'") from None


def _is_ascii_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def build_message(text: str, key: str) -> str:
    """Join text and key into a request, within the server's buffer size."""
    return f"{text}@{key}"[: BUFFER_SIZE - 1]


def exchange(message: str, port: int, host: str = DEFAULT_HOST) -> str:
    """Send a request to a server and return its single reply."""
    try:
        address = socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_STREAM)[0][4]
    except socket.gaierror:
        raise ClientError("ERROR, no such host") from None
    try:
        with socket.create_connection(address) as sock:
            sock.sendall(message.encode("latin-1"))
            reply = sock.recv(BUFFER_SIZE - 1)
    except OSError as exc:
        raise ClientError(f"ERROR connecting: {exc}") from None
    return reply.decode("latin-1")


def _run(action) -> int:
    try:
        response = action()
    except ClientError as exc:
        print(f"CLIENT: {exc}", file=sys.stderr)
        return 1
    print(response)
    return 0


def enc_main(argv: Sequence[str] | None = None) -> int:
    """Encrypt a plaintext file with a key file through the local server."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("USAGE: enc_client plaintext_file key_file port", file=sys.stderr)
        return 1

    def action() -> str:
        plaintext = read_plaintext_file(args[0])
        key = read_plaintext_file(args[1])
        if len(key) < len(plaintext):
            raise ClientError("ERROR - Key too short to match plaintext")
        validate_plaintext(plaintext)
        return exchange(build_message(plaintext, key), _leading_int(args[2]), "127.0.0.1")

    return _run(action)


def dec_main(argv: Sequence[str] | None = None) -> int:
    """Decrypt a ciphertext file with a key file through a server."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print(
            "USAGE: dec_client ciphertext_file key_file port [hostname]",
            file=sys.stderr,
        )
        return 1
    host = args[3][:_HOSTNAME_LIMIT] if len(args) >= 4 else DEFAULT_HOST

    def action() -> str:
        ciphertext = read_ciphertext_file(args[0])
        key = read_ciphertext_file(args[1])
        if len(key) < len(ciphertext):
            raise ClientError("ERROR - Key too short to match ciphertext")
        return exchange(build_message(ciphertext, key), _leading_int(args[2]), host)

    return _run(action)