"""Guard-clause support shared by identifiers and collections.

Every ``must_*`` method delegates to :func:`fail` once its predicate does not
hold.  The caller's ``on_failure`` factory wins over the default error, and
only the chosen one is ever constructed.
"""

from __future__ import annotations

from typing import Callable, NoReturn, Optional

ErrorFactory = Callable[[], BaseException]


def fail(on_failure: Optional[ErrorFactory], default: ErrorFactory) -> NoReturn:
    """Raise the caller's error if a factory was supplied, else the default one."""
    if on_failure is not None:
        raise on_failure()
    raise default()
