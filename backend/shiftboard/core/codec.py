"""
Opaque organization identifiers.

Numeric organization ids never leave the service in the clear; clients see a
URL-safe token (the ``cid`` request parameter) and the API layer decodes it
before any command is built.
"""

import base64
import binascii

from shiftboard.core.config import settings
from shiftboard.domain.shared.exceptions import InvalidArgumentError

# Identifiers are stored as 32-bit signed integers
MAX_ID = 2**31 - 1


class IdentifierCodec:
    """Encode organization ids as salted, unpadded URL-safe base64 tokens."""

    def __init__(self, salt: str):
        if ":" in salt:
            raise ValueError("Codec salt must not contain ':'")
        self.salt = salt

    def encode(self, organization_id: int) -> str:
        if organization_id < 0:
            raise InvalidArgumentError(
                "cid", organization_id, "Organization id must not be negative"
            )
        raw = f"{self.salt}:{organization_id}".encode()
        return base64.urlsafe_b64encode(raw).decode().rstrip("=")

    def decode(self, token: str) -> str:
        """Return the canonical numeric string behind ``token``."""
        padded = token + "=" * (-len(token) % 4)
        try:
            raw = base64.b64decode(padded, altchars=b"-_", validate=True).decode()
        except (binascii.Error, UnicodeDecodeError, ValueError):
            raise InvalidArgumentError("cid", token, f"Invalid client id: {token}") from None

        salt, _, value = raw.rpartition(":")
        if (
            salt != self.salt
            or not value.isascii()
            or not value.isdigit()
            or int(value) > MAX_ID
        ):
            raise InvalidArgumentError("cid", token, f"Invalid client id: {token}")
        return str(int(value))

    def decode_id(self, token: str) -> int:
        return int(self.decode(token))


codec = IdentifierCodec(settings.CODEC_SALT)
