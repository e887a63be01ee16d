"""
Lift helpers with semantic namespaces.

    from monad_extra import lift as L

    L.up.*    - values, Results and plain predicates into effects
    L.call()  - async Result functions into effects

Effects are awaited directly for their Result:

    from monad_extra import any_, if_, lift as L

    is_even = L.up.predicate(lambda n: n % 2 == 0)
    found = await any_(is_even, [1, 3, 4])  # Ok(True)

    greeting = if_(L.call(is_admin, 42), L.up.pure("hi boss"), L.up.pure("hi"))
"""

from __future__ import annotations

from . import up

from .up import fail, from_result, predicate, pure
from .call import call

__all__ = (
    # Namespace (L.up.*)
    "up",
    # Up
    "pure",
    "fail",
    "from_result",
    "predicate",
    # Call
    "call",
)
