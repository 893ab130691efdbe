"""Language fallback providers."""

from agreedisclaimer.fallbacks.region_fallback import RegionFallbackProvider

__all__ = ["RegionFallbackProvider"]
