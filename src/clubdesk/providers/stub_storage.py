"""HMAC-signed POST policy issuer for local and test use."""

import base64
import binascii
import hashlib
import hmac
import json
from datetime import datetime, timedelta
from typing import Callable, Optional

from clubdesk.core.timezone import now_utc, to_utc


class StubObjectStorage:
    """
    Issues S3-style POST policies signed with a shared secret.

    No bytes are stored; whatever sits behind endpoint is expected to
    verify the policy with the same secret.
    """

    def __init__(
        self,
        endpoint: str,
        secret: str,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._endpoint = endpoint.rstrip("/")
        self._secret = secret.encode("utf-8")
        self._clock = clock

    def sign_upload(
        self,
        bucket: str,
        key: str,
        content_type: str,
        max_size: int,
        ttl: int,
    ) -> tuple[dict[str, str], str]:
        """Return (fields, url) for a browser POST upload."""
        expires = self._clock() + timedelta(seconds=ttl)
        policy = {
            "expiration": expires.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "conditions": [
                {"bucket": bucket},
                {"key": key},
                {"Content-Type": content_type},
                ["content-length-range", 0, max_size],
            ],
        }
        encoded = base64.b64encode(
            json.dumps(policy, separators=(",", ":")).encode("utf-8")
        ).decode("ascii")
        signature = hmac.new(self._secret, encoded.encode("ascii"), hashlib.sha256).hexdigest()

        fields = {
            "key": key,
            "Content-Type": content_type,
            "policy": encoded,
            "x-signature": signature,
        }
        return fields, f"{self._endpoint}/{bucket}"

    def verify(self, fields: dict[str, str], at: Optional[datetime] = None) -> bool:
        """Check a signature and its expiry. Malformed fields fail the check."""
        encoded = fields.get("policy")
        signature = fields.get("x-signature")
        if not isinstance(encoded, str) or not isinstance(signature, str):
            return False
        expected = hmac.new(self._secret, encoded.encode("utf-8"), hashlib.sha256).hexdigest()
        if not hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8")):
            return False
        try:
            policy = json.loads(base64.b64decode(encoded, validate=True))
            expiration = datetime.strptime(policy["expiration"], "%Y-%m-%dT%H:%M:%SZ")
        except (binascii.Error, ValueError, KeyError, TypeError):
            return False
        moment = to_utc(at or self._clock()).replace(tzinfo=None)
        return moment < expiration
