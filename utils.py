"""
Utility functions for the stream demos.

Rendering of terminal results as text, and a helper that times a terminal
operation and records its peak memory.
"""

import gc
import logging
import time
import tracemalloc
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)


def format_value(value: Any) -> str:
    """
    Render a terminal result as text.

    Lists read "[a, b]", mappings read "{k=v, k2=v2}", booleans and None
    print as true/false/null, and everything else falls back to str().
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        entries = ", ".join(f"{format_value(k)}={format_value(v)}" for k, v in value.items())
        return "{" + entries + "}"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    return str(value)


def format_inline(items) -> str:
    """Render items space-separated with a trailing space, e.g. "a1 a2 " """
    return "".join(f"{format_value(item)} " for item in items)


def measure_performance(operation_name: str, func: Callable, *args, **kwargs) -> Dict[str, Any]:
    """Run func, returning its result along with timing and peak memory"""

    tracemalloc.start()
    gc.collect()
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _, peak = tracemalloc.get_traced_memory()

        performance_info = {
            "operation": operation_name,
            "result": result,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": peak / 1024 / 1024,
            "success": True,
            "result_size": len(result) if hasattr(result, "__len__") else None,
        }
        logger.debug(f"{operation_name} finished in {execution_time_ms:.3f} ms")
        return performance_info

    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        logger.error(f"{operation_name} failed after {execution_time_ms:.3f} ms: {e}")
        raise

    finally:
        tracemalloc.stop()
