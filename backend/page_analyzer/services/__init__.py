"""Services for probing urls."""
from .checker import LivenessChecker, ProbeResult

__all__ = ["LivenessChecker", "ProbeResult"]
