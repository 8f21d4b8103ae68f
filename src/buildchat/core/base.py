"""Base classes for configuration and snapshot models.

This module contains the foundational classes used throughout
buildchat:
- Closeable Protocol for resource cleanup
- BaseCloseable for automatic cleanup cascade
- BaseConfig for configuration models
- BaseSnapshot for read-only build data handed over by the host

These live in their own module so that config.py and log.py can
both import them without a cycle.
"""

from __future__ import annotations

import sys
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

# ============================================================
# CLOSEABLE PROTOCOL AND BASE CLASS
# ============================================================

@runtime_checkable
class Closeable(Protocol):
    """Protocol for objects that support close()."""

    def close(self) -> None:
        """Release resources."""
        ...


class BaseCloseable(BaseModel):
    """Model that closes its Closeable children on close().

    Subclasses become context managers. Closing walks every field
    and calls close() on children implementing Closeable, carrying
    on past children that fail:
    State.__exit__() → Config.close() → Logger.close() → Sink.close()
    """

    def close(self):
        """Close all closeable child objects.

        Errors from a child are written to stderr so the remaining
        children still get closed.
        """
        for field_name in self.__class__.model_fields:
            child = getattr(self, field_name, None)
            if child is None:
                continue

            if isinstance(child, Closeable):
                try:
                    child.close()
                except Exception as e:
                    msg = f"Warning: Error closing {field_name}: {e}"
                    print(msg, file=sys.stderr)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):  # noqa: U100
        self.close()
        return False


# ============================================================
# BASE CLASSES (semantic markers for readers)
# ============================================================

class BaseConfig(BaseCloseable):
    """Base class for all configuration sections.

    Marks a model as configuration (loaded from YAML/env/CLI),
    as opposed to build data supplied by the host.
    """
    pass


class BaseSnapshot(BaseModel):
    """Base class for immutable build snapshots.

    A snapshot is assembled by the host once per lifecycle event
    and never mutated afterwards, so one instance can be shared
    across threads handling different builds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


__all__ = ["Closeable", "BaseCloseable", "BaseConfig", "BaseSnapshot"]
