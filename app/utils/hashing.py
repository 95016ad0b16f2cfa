import hashlib
import json


def quote_cache_key(prefix: str, payload: dict) -> str:
    """Stable key for a request: SHA-256 of its canonical (sorted-key) JSON form."""
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    return f"{prefix}:{hashlib.sha256(canonical.encode()).hexdigest()}"
