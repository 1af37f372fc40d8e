"""Command line: check that an attestation token's signing certificate carries a quote."""

from __future__ import annotations

import sys
from typing import Sequence

from . import fetch
from .context import current, log
from .jwks import Jwks
from .jwt_token import Jwt, JwtError
from .utils import read_lines
from .x509ext import X509QuoteExt

QUOTE_OID = "1.3.6.1.4.1.311.105.1"
PROGRAM = "maavalidatejwt"


def is_quote_in_extension(ext: bytes) -> bool:
    """Return whether the extension value carries an embedded quote."""
    return len(ext) > 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the check and return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    context = current()
    context.set([PROGRAM, *args])
    context.dump()

    try:
        lines = read_lines(context.jwt_filename)
    except (ValueError, OSError):
        return 1

    jwt = Jwt()
    try:
        jwt.deserialize(lines[0])
    except JwtError:
        return 1

    try:
        response = fetch.get(jwt.jku)
    except (ValueError, fetch.FetchError):
        response = ""
    if not response:
        log("ERROR - Failed to retrieve certificates")
        return 1

    try:
        certs = Jwks(response).get_certs(jwt.kid)
    except KeyError:
        certs = []
    if not certs:
        log("ERROR - Failed to find x509 certificates for the key")
        return 1

    try:
        certificate = X509QuoteExt(certs[0])
    except ValueError:
        log("ERROR - Failed to deserialize x509 cert")
        return 1

    if is_quote_in_extension(certificate.find_extension(QUOTE_OID)):
        log("Embedded quote found in certificate")
        return 0
    log("ERROR - Failed to find wanted quote extension")
    return 1


if __name__ == "__main__":
    sys.exit(main())