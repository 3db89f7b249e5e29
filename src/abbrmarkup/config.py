"""ContextVar-based default profile for abbrmarkup.

Callers that render many trees with the same options can set the profile once
for the current context instead of threading it through every call. An
explicit profile passed to ``render()`` or ``HtmlFormatter`` always wins.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from abbrmarkup.config import profile_context
    from abbrmarkup.profile import Profile

    with profile_context(Profile(indentation="  ")):
        html = render(tree)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from abbrmarkup.profile import Profile

# Module-level default profile (reused, never recreated)
_DEFAULT_PROFILE: Profile = Profile()

_active_profile: ContextVar[Profile] = ContextVar(
    "active_profile",
    default=_DEFAULT_PROFILE,
)


def get_profile() -> Profile:
    """Get the active output profile for this thread/context."""
    return _active_profile.get()


def set_profile(profile: Profile) -> None:
    """Set the output profile for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _active_profile.set(profile)


def reset_profile() -> None:
    """Reset to the default profile.

    Reuses the module-level _DEFAULT_PROFILE singleton, avoiding allocation.
    """
    _active_profile.set(_DEFAULT_PROFILE)


@contextmanager
def profile_context(profile: Profile) -> Iterator[None]:
    """Context manager for a temporary profile change.

    Example:
        >>> with profile_context(Profile(format=False)):
        ...     get_profile().format
        False
        >>> get_profile().format
        True

    Restores the previous profile even if an exception is raised.

    """
    previous = _active_profile.get()
    _active_profile.set(profile)
    try:
        yield
    finally:
        _active_profile.set(previous)


__all__ = [
    "get_profile",
    "profile_context",
    "reset_profile",
    "set_profile",
]
