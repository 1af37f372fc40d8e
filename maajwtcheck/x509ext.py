"""Extraction of X.509 certificate extensions by object identifier."""

from __future__ import annotations

from cryptography import x509

from . import b64
from .context import log

_WHITESPACE = " \t\n\r\v\f"


def _raw_value(extension: x509.Extension) -> bytes:
    value = extension.value
    if isinstance(value, x509.UnrecognizedExtension):
        return value.value
    try:
        return value.public_bytes()
    except (AttributeError, NotImplementedError):
        return b""


class X509QuoteExt:
    """Extensions of one certificate, keyed by dotted OID string."""

    def __init__(self, cert: str | None = None) -> None:
        self.extensions: dict[str, bytes] = {}
        if cert is not None:
            self.deserialize(cert)

    def deserialize(self, cert: str) -> None:
        """Load a base64 DER certificate body; raise ValueError if invalid."""
        self.extensions.clear()
        log("Raw cert string value:")
        log(cert)
        body = "".join(ch for ch in cert if ch not in _WHITESPACE)
        try:
            certificate = x509.load_der_x509_certificate(b64.decode(body))
            extensions = certificate.extensions
        except ValueError as exc:
            log(f"Failed to deserialize x509 cert: {exc}")
            raise ValueError(f"invalid certificate: {exc}") from exc
        for extension in extensions:
            oid = extension.oid.dotted_string
            self.extensions.setdefault(oid, _raw_value(extension))
        for oid, value in self.extensions.items():
            log(oid)
            log(value.hex())
            log("=" * 40)

    def find_extension(self, oid: str) -> bytes:
        """Return the raw value of extension ``oid``, or b'' if absent."""
        return self.extensions.get(oid, b"")