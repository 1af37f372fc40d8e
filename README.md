# maajwtcheck

A small command-line tool and library for checking a JWT issued by an
attestation service.

Given a file whose first line is such a token, the `maavalidatejwt` command:

1. splits the token into header, payload and signature and Base64-decodes
   the header and payload;
2. reads the `jku` (key set URL) and `kid` (key id) from the header;
3. downloads the JSON Web Key Set from the `jku` URL;
4. picks the X.509 certificate chain (`x5c`) of the token's `kid`;
5. loads the first certificate of that chain and checks that it carries a
   non-empty extension with OID `1.3.6.1.4.1.311.105.1` (the embedded
   enclave quote).

It exits with status 0 when every step succeeds and with status 1 as soon
as one fails.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
maavalidatejwt [options] file
```

Options are matched without regard to case:

| Option                  | Meaning                                              |
|-------------------------|------------------------------------------------------|
| `-mrsigner <value>`     | Record an expected MRSIGNER value                    |
| `-mrenclave <value>`    | Record an expected MRENCLAVE value                   |
| `-productid <value>`    | Record an expected PRODUCTID value                   |
| `-svn <value>`          | Record an expected SVN value                         |
| `-isdebuggable <value>` | Record an expected ISDEBUGGABLE value (non-empty → 1) |
| `-v`, `--verbose`       | Print the run's arguments and each step taken        |
| `-h`, `--help`          | Print the usage text and exit with status 0          |

Exactly one file name may be given. Running without arguments, with an
option that lacks its value, or with a second file name prints the usage
text and exits with status 0.

Without `-v` the command prints nothing on success or failure; only its
exit status tells the result. With `-v` it prints the arguments of the run
and a message for each step, which is the easiest way to see where a check
stopped:

```
maavalidatejwt -v token.jwt
```

The key set is fetched over TLS 1.2 or newer, following redirects. The
server's certificate is not verified, and the response body is used
whatever the HTTP status.

## What it does not do

- It does not verify the token's signature.
- The `-mrsigner`, `-mrenclave`, `-productid`, `-svn` and `-isdebuggable`
  values are recorded and shown with `-v`, but nothing is compared with them.
- The quote is only looked for: a non-empty extension value counts as found.
  Its contents are not parsed or verified.
- Only the first line of the input file is read as the token.

## Library

The pieces the command is built from can be used on their own:

- `maajwtcheck.b64` — strict standard Base64 `encode` / `decode`; `decode`
  raises `Base64Error` (a `ValueError`) on bad length, padding or characters.
- `maajwtcheck.jwt_token` — `Jwt().deserialize(token)` splits and decodes a
  compact token and exposes its `jku`, `kid` and `tenant` (the first label of
  the `https://` host in the header, at most 24 characters);
  `decode_segment` decodes one unpadded segment. Malformed tokens raise
  `JwtError`.
- `maajwtcheck.jwks` — `Jwks(text)` indexes a key set by key id as `Jwk`
  entries (`kid`, `kty`, `x5c`); `get_certs(kid)` returns the `x5c`
  certificates of one key and raises `KeyError` if the key is absent.
- `maajwtcheck.fetch` — `get(url, headers=None)` performs an HTTP GET and
  returns the body as text; `headers` is one optional `"Name: value"` line.
  An empty URL raises `ValueError`; a failed request raises `FetchError`.
- `maajwtcheck.x509ext` — `X509QuoteExt(cert)` loads a Base64 DER
  certificate body (whitespace ignored) and raises `ValueError` if it is not
  a valid certificate; `find_extension(oid)` returns the raw bytes of the
  extension with that dotted OID, or `b""`.
- `maajwtcheck.utils` — lenient `get_value` / `get_array` extraction from
  JSON-like text, regex `split`, `remove_char`, `remove_spaces` and
  `read_lines` for reading a file as a list of lines.
- `maajwtcheck.context` — the `Context` settings parsed from the command
  line, `current()` for the process-wide one, `log` (printed only when
  verbose), `always_log` and `usage`.
- `maajwtcheck.cli` — `main(argv=None)` runs the whole check and returns the
  exit status; `is_quote_in_extension(ext)` is the quote test used by it.
- `maajwtcheck.ansi` — the `Code` enum of terminal style escape codes
  (`str(Code.RED)` gives the sequence) and `color_n`, `color_bg_n`,
  `color_rgb`, `color_bg_rgb` for palette and 24-bit colours.

```python
from maajwtcheck import b64

text = b64.encode(b"hello")
assert text == "aGVsbG8="
assert b64.decode(text) == b"hello"
```

```python
from maajwtcheck.jwks import Jwks

keys = Jwks('{"keys": [{"kid": "key-1", "kty": "RSA", "x5c": ["MIIB"]}]}')
assert keys.get_certs("key-1") == ["MIIB"]
```

```python
from maajwtcheck.cli import main

status = main(["-v", "token.jwt"])
```