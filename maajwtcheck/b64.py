"""Standard base64 encoding and decoding with strict validation."""

from __future__ import annotations

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_PAD = "="
_LOOKUP = {ch: index for index, ch in enumerate(_ALPHABET)}


class Base64Error(ValueError):
    """Raised when text is not valid base64."""


def encode(data: bytes) -> str:
    """Encode bytes as padded base64 text."""
    data = bytes(data)
    out: list[str] = []
    full = len(data) - len(data) % 3
    for start in range(0, full, 3):
        value = int.from_bytes(data[start:start + 3], "big")
        out.extend(_ALPHABET[(value >> shift) & 0x3F] for shift in (18, 12, 6, 0))
    rest = data[full:]
    if len(rest) == 1:
        value = rest[0] << 16
        out.extend(_ALPHABET[(value >> shift) & 0x3F] for shift in (18, 12))
        out.append(_PAD * 2)
    elif len(rest) == 2:
        value = (rest[0] << 16) | (rest[1] << 8)
        out.extend(_ALPHABET[(value >> shift) & 0x3F] for shift in (18, 12, 6))
        out.append(_PAD)
    return "".join(out)


def decode(text: str) -> bytes:
    """Decode padded base64 text; raise Base64Error on malformed input."""
    if len(text) % 4:
        raise Base64Error("Invalid base64 length!")
    decoded = bytearray()
    for start in range(0, len(text), 4):
        value = 0
        for offset, ch in enumerate(text[start:start + 4]):
            value <<= 6
            if ch == _PAD:
                remaining = len(text) - (start + offset)
                if remaining == 1:
                    decoded += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF))
                    return bytes(decoded)
                if remaining == 2:
                    decoded.append((value >> 10) & 0xFF)
                    return bytes(decoded)
                raise Base64Error("Invalid padding in base64!")
            try:
                value |= _LOOKUP[ch]
            except KeyError:
                raise Base64Error("Invalid character in base64!") from None
        decoded += value.to_bytes(3, "big")
    return bytes(decoded)