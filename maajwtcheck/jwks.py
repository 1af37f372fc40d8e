"""JSON Web Key sets as returned by the attestation service."""

from __future__ import annotations

from dataclasses import dataclass, field

from .context import log
from .utils import get_array, get_value, split

_KEY_SEPARATOR = r"\}[ \n\r]*,"


@dataclass
class Jwk:
    """One JSON Web Key: identifier, key type and certificate chain."""

    kid: str = ""
    kty: str = ""
    x5c: list[str] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "Jwk":
        """Extract the key fields from a JSON fragment."""
        return cls(
            kid=get_value(text, "kid"),
            kty=get_value(text, "kty"),
            x5c=get_array(text, "x5c"),
        )


class Jwks:
    """A set of keys indexed by key identifier."""

    def __init__(self, text: str) -> None:
        self.keys: dict[str, Jwk] = {}
        for raw_key in split(text, _KEY_SEPARATOR):
            key = Jwk.from_text(raw_key)
            self.keys[key.kid] = key

    def get_certs(self, kid: str) -> list[str]:
        """Return the certificate chain of key ``kid``; raise KeyError if absent."""
        try:
            return list(self.keys[kid].x5c)
        except KeyError:
            log(f"Could not find key: {kid}")
            raise