from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar, cast

import pytest
from typing_extensions import ParamSpec

P = ParamSpec("P")
R = TypeVar("R")


def parametrize(
    argnames: str | Sequence[str],
    argvalues: Iterable[object],
    *,
    ids: Iterable[str | float | int | bool | None]
    | Callable[[object], object | None]
    | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Typed wrapper around ``pytest.mark.parametrize`` that keeps the test signature.

    Parameters:
        argnames: Parameter name(s) injected into the test callable.
        argvalues: Values or value-tuples, one per generated case.
        ids: Optional case identifiers or a callable producing them.

    Returns:
        decorator: Decorator applying the parametrization.
    """
    return cast(
        Callable[[Callable[P, R]], Callable[P, R]],
        pytest.mark.parametrize(argnames, argvalues, ids=ids),
    )
