import hashlib
import hmac

from gitfox_webhooks.core.errors import AuthenticationError

SIGNATURE_HEADER = "X-Gitfox-Signature"


def compute_signature(secret: str, payload: bytes) -> str:
    """Return the hex encoded HMAC-SHA256 of the raw payload."""
    mac = hmac.new(secret.encode(), msg=payload, digestmod=hashlib.sha256)
    return mac.hexdigest()


def verify_signature(secret: str, payload: bytes, signature: str) -> None:
    """
    Verify a Gitfox webhook signature.

    The signature is compared with an HMAC-SHA256 of the raw request body, byte
    for byte as received, keyed with the shared secret.

    Args:
        secret: The shared webhook secret.
        payload: The raw request body.
        signature: Value of the X-Gitfox-Signature header.

    Raises:
        AuthenticationError: If the signature does not match.
    """
    expected_signature = compute_signature(secret, payload)

    # Securely compare the signatures
    if not hmac.compare_digest(signature.encode(), expected_signature.encode()):
        raise AuthenticationError("HMAC verification failed")
