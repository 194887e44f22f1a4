"""
Prime Cache — process-wide memoized prime enumeration.
"""

from osabie_numeric.primes.cache import PrimeCache, PrimeCacheConfig

__all__ = [
    "PrimeCache",
    "PrimeCacheConfig",
]
