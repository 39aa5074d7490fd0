import inspect
import warnings
from collections.abc import Callable
from functools import wraps


def deprecated_alias[**P, R](name: str, target: Callable[P, R]) -> Callable[P, R]:
    """Expose `target` under a legacy `name`, warning on every call.

    Coroutine functions stay detectable as such through the alias.
    """
    msg = f"`{name}` is deprecated, use `{target.__name__}` instead."

    @wraps(target)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        warnings.warn(msg, DeprecationWarning, stacklevel=2)
        return target(*args, **kwargs)

    wrapper.__name__ = name
    wrapper.__qualname__ = name
    if inspect.iscoroutinefunction(target):
        inspect.markcoroutinefunction(wrapper)
    return wrapper
