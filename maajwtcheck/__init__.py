"""Check attestation JWTs: fetch the signing key set and look for the enclave quote extension in the certificate."""

__version__ = "0.1.0"