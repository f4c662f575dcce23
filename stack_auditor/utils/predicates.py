"""Normalization of user-supplied template predicates."""

import inspect
from collections.abc import Awaitable, Callable

from ..models.conditions import TemplateFilter

AsyncPredicate = Callable[[str], Awaitable[bool]]


async def accept_all(template_body: str) -> bool:
    return True


def as_async_predicate(predicate: TemplateFilter | None) -> AsyncPredicate:
    """
    Wrap a sync or async predicate so that it always returns an awaitable.

    The predicate may return a plain value or an awaitable resolving to
    one; either way the wrapper resolves to its truthiness. Exceptions
    raised by the predicate propagate unchanged.

    Args:
        predicate: Callable taking a template body, or None to accept all

    Returns:
        Coroutine function resolving to True or False
    """
    if predicate is None:
        return accept_all

    async def check(template_body: str) -> bool:
        result = predicate(template_body)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)

    return check
