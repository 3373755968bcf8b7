"""
Hardware capability probe.

The vectorized execution path relies on numpy's compiled loops, which use the
SIMD instruction sets of the host CPU when numpy was built with support for
them. numpy reports which of those features it detected at runtime.
"""

import functools
import importlib

# Private numpy module exposing '__cpu_features__' (moved to '_core' in numpy 2)
_UMATH_MODULES = ("numpy._core._multiarray_umath", "numpy.core._multiarray_umath")

@functools.lru_cache(maxsize=None)
def cpu_features() -> dict[str, bool]:
    """
    Return the CPU features numpy detected at runtime, e.g. {'SSE2': True, 'AVX512F': False, ...}.

    An empty dict is returned when the running numpy does not report them.
    """
    for module_name in _UMATH_MODULES:
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            continue
        return dict(getattr(module, "__cpu_features__", {}))
    return {}

def is_hardware_accelerated() -> bool:
    """Whether numpy can use at least one SIMD instruction set on this machine."""
    return any(cpu_features().values())
