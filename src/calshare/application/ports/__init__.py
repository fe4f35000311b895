"""Application ports - interfaces for external adapters."""

from calshare.application.ports.permission_evaluator import (
    AuditContext,
    EvaluationResult,
    PermissionEvaluator,
)
from calshare.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuditContext",
    "EvaluationResult",
    "PermissionEvaluator",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
