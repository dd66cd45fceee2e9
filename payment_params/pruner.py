"""Drop absent values from a parameter map before it goes on the wire."""
from typing import Any


def prune(params: dict[str, Any]) -> dict[str, Any]:
    """
    Return a copy of params without the keys whose value is None.

    Nested maps are left as-is; each one is pruned where it is built.
    The input is never modified, so pruning twice equals pruning once.
    """
    return {key: value for key, value in params.items() if value is not None}
