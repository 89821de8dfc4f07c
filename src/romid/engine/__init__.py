"""Uniform verdicts and CNP fingerprints over the identifier validators."""

from .checks import KINDS, Verdict, check
from .fingerprint import CnpFingerprinter, fingerprinter_from_env, last_four

__all__ = ["KINDS", "Verdict", "check", "CnpFingerprinter", "fingerprinter_from_env", "last_four"]
