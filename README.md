# otpad

A one-time pad cipher over the 27-character alphabet of the capital letters
`A`–`Z` plus the space. It comes with a key generator, an encryption server, a
decryption server, and a client for each server.

Every character maps to a value from 0 to 26, where `A` is 0, `Z` is 25 and
the space is 26. Encryption adds the key value to the plaintext value modulo 27,
and decryption subtracts it. The key must be at least as long as the message;
only as many key characters as the message has are used.

## Installation

```
pip install .
```

## Generating a key

```
otpad-keygen 256 > mykey
```

This prints 256 random characters from the alphabet, then a newline. The
argument is read as a leading integer; if it is not a positive number, or the
number of arguments is not exactly one, the command prints a message to
standard error and exits with status 1.

## Running the servers

```
otpad-enc-server 57171 &
otpad-dec-server 57172 &
```

Each server listens on the given port on all interfaces and handles every
connection on its own thread. It reads one request, answers it once and closes
the connection. A request is the message and the key joined by `@` (empty
fields between `@` signs are skipped).

Replies:

- `ERROR: Invalid input` when the request holds no text, and
  `ERROR: Invalid key` when it holds no key.
- `ERROR: Key too short` when the key is shorter than the message.
- The decryption server answers `ERROR: Invalid ciphertext character` or
  `ERROR: Invalid key character` when either holds anything but capital
  letters and spaces.
- The encryption server accepts ASCII letters and spaces. If the text or key
  holds any other character, it logs the error to standard error and closes
  the connection without a reply.
- Otherwise the reply is the enciphered or deciphered text.

If the port cannot be bound, the server prints the error and exits with status
1. Interrupting it with Ctrl-C stops it cleanly.

## Encrypting and decrypting

```
otpad-enc-client plaintext mykey 57171 > ciphertext
otpad-dec-client ciphertext mykey 57172 > plaintext_again
```

The encryption client reads the plaintext and key files, strips trailing
newlines, carriage returns and spaces, checks that the key is at least as long
as the plaintext and that the plaintext has only letters and spaces, and then
connects to the server on `127.0.0.1`.

The decryption client reads each file up to its first newline, checks the key
length, and connects to the host named by an optional fourth argument, which
is `localhost` by default:

```
otpad-dec-client ciphertext mykey 57172 server.example.com
```

Both clients print the server's reply followed by a newline. On a local error
(a missing or empty file, a short key, a bad plaintext character, an unknown
host or a failed connection) they print a message starting with `CLIENT:` to
standard error and exit with status 1.

## Using it as a library

```python
from otpad.cipher import encrypt, decrypt
from otpad.keygen import generate_key

key = generate_key(11)
ciphertext = encrypt("HELLO WORLD", key)
assert decrypt(ciphertext, key) == "HELLO WORLD"
```

`encrypt` and `decrypt` raise `otpad.cipher.CipherError` (a `ValueError`) for
a short key or invalid characters. `generate_key` raises `ValueError` for a
length that is not positive, and takes an optional `random.Random` to draw
from.

The server side can be driven without a socket through
`otpad.server.handle_request(data, mode)`, which takes the request bytes and a
`Mode` (`Mode.ENCRYPT` or `Mode.DECRYPT`) and returns the reply bytes.
`make_server(port, mode, host)` builds a `CipherServer` to run in your own
code, and `otpad.client.exchange(message, port, host)` sends one request and
returns the reply.

## Limits

A request is read with a single receive of at most 99,999 bytes, and the
clients cut longer messages to that size. Keys come from Python's `random`
module, which is not a cryptographically secure source, and traffic between
clients and servers is sent in the clear.