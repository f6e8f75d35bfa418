"""Error Boundary - catch-all that turns unexpected failures into ServerError.

Invariants:
    - ForumError subclasses pass through untouched
    - Anything else is logged with traceback, then re-raised as ServerError
      chained to the original cause
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from forum.core.errors import ForumError, ServerError

logger = logging.getLogger(__name__)


@contextmanager
def translate_unhandled(operation: str) -> Iterator[None]:
    try:
        yield
    except ForumError:
        raise
    except Exception as e:
        logger.error(
            f"Failed to {operation}: {e}",
            exc_info=True, extra={"operation": operation},
        )
        raise ServerError(operation) from e
