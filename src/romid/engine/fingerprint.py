from __future__ import annotations
import hmac, hashlib, os
from dataclasses import dataclass
from typing import Optional

from ..identifiers.validators import normalize_spaces_dashes

HASH_KEY_ENV = "ROMID_HASH_KEY"

@dataclass
class CnpFingerprinter:
    """
    Deterministic, non-reversible lookup keys for CNPs.

    - HMAC-SHA256 over the normalized CNP (separators removed) with a secret key.
    - The same CNP always maps to the same hex digest under the same key, so
      stored records can be found by CNP without keeping the CNP in clear.
    - Set ROMID_HASH_KEY for digests that are stable across processes.
    """
    key: bytes

    @staticmethod
    def _norm(cnp: Optional[str]) -> str:
        return normalize_spaces_dashes(cnp)

    def search_hash(self, cnp: Optional[str]) -> str:
        msg = self._norm(cnp).encode("ascii", errors="replace")
        return hmac.new(self.key, msg, hashlib.sha256).hexdigest()

    def matches(self, cnp: Optional[str], digest: str) -> bool:
        return hmac.compare_digest(self.search_hash(cnp), digest)


def last_four(cnp: Optional[str]) -> str:
    """Last four digits for display next to a fingerprint; empty if too short."""
    s = normalize_spaces_dashes(cnp)
    return s[-4:] if len(s) >= 4 else ""


def fingerprinter_from_env(default_key: bytes | None = None) -> CnpFingerprinter:
    """
    Prefer a configured key (ROMID_HASH_KEY) so digests survive restarts.
    Falls back to the given default key, then to a random per-process key.
    """
    env = os.getenv(HASH_KEY_ENV)
    key = env.encode("utf-8") if env else (default_key or os.urandom(32))
    return CnpFingerprinter(key=key)
