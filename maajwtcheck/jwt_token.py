"""Parsing of attestation JSON Web Tokens (header fields only)."""

from __future__ import annotations

import re

from . import b64
from .context import log
from .utils import get_value, split

_DNS_PATTERN = re.compile(r"https://([0-9a-zA-Z.]*)")
_TENANT_MAX = 24


class JwtError(ValueError):
    """Raised when a token cannot be deserialized."""


def decode_segment(data: str) -> str:
    """Decode one unpadded base64 token segment into text."""
    missing = -len(data) % 4
    raw = b64.decode(data + "=" * missing)
    return raw.decode("utf-8", errors="replace")


class Jwt:
    """A JSON Web Token split into its parts, with header fields extracted."""

    def __init__(self) -> None:
        self.encoded_token = ""
        self.encoded_header = ""
        self.encoded_payload = ""
        self.encoded_signature = ""
        self.decoded_header = ""
        self.decoded_payload = ""
        self._jku = ""
        self._kid = ""
        self.attest_dns = ""
        self._tenant = ""

    def deserialize(self, token: str) -> None:
        """Split and decode ``token``; raise JwtError if it is malformed."""
        self.encoded_token = token
        parts = split(token, r"\.")
        if len(parts) != 3:
            log("Failed to deserialize JWT, exception: Invalid token!")
            raise JwtError("Invalid token!")
        self.encoded_header, self.encoded_payload, self.encoded_signature = parts
        try:
            self.decoded_header = decode_segment(self.encoded_header)
            self.decoded_payload = decode_segment(self.encoded_payload)
        except b64.Base64Error as exc:
            log(f"Failed to deserialize JWT, exception: {exc}")
            raise JwtError(str(exc)) from exc
        self._jku = get_value(self.decoded_header, "jku")
        self._kid = get_value(self.decoded_header, "kid")
        self.attest_dns = self._parse_dns()
        self._tenant = self._parse_tenant()

    @property
    def jku(self) -> str:
        """URL of the key set that signed the token."""
        return self._jku

    @property
    def kid(self) -> str:
        """Identifier of the signing key."""
        return self._kid

    @property
    def tenant(self) -> str:
        """Attestation tenant name, at most 24 characters."""
        return self._tenant[:_TENANT_MAX]

    def _parse_dns(self) -> str:
        if not self.decoded_header:
            log("Empty decoded JWT header, cannot retrieve attest DNS")
            return ""
        match = _DNS_PATTERN.search(self.decoded_header)
        return match.group(1) if match else ""

    def _parse_tenant(self) -> str:
        if not self.attest_dns:
            log("Empty attest DNS, cannot retrieve tenant name")
            return ""
        return self.attest_dns.split(".", 1)[0]