"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError            (domain.py)
    │   ├── UnknownEventTypeError
    │   └── ViewNotAppliedError
    ├── ApplicationError       (application.py)
    │   └── ConfigError        (video_views.config.validation)
    └── InfrastructureError    (infrastructure.py)
        └── PersistenceError
"""

from video_views.kernel.errors.application import ApplicationError
from video_views.kernel.errors.base import BaseError
from video_views.kernel.errors.domain import (
    DomainError,
    UnknownEventTypeError,
    ViewNotAppliedError,
)
from video_views.kernel.errors.infrastructure import (
    InfrastructureError,
    PersistenceError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "PersistenceError",
    "UnknownEventTypeError",
    "ViewNotAppliedError",
]
