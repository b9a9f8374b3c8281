"""Single-value constraint checks as ServiceResults."""

from __future__ import annotations

from projctl.domain.validation import Constraint, validate
from projctl.services.result import ServiceResult


def check_value(constraint: Constraint) -> ServiceResult:
    """Run :func:`validate` on one constraint.

    Returns ``ok=True`` when every rule passes, otherwise a
    ``CONSTRAINT_FAILED`` error carrying the rules that were set.
    """
    op = "check_value"
    rules = constraint.model_dump(exclude={"value"}, exclude_defaults=True)
    data = {
        "value": str(constraint.value),
        "kind": constraint.value.kind,
        "rules": rules,
    }
    if validate(constraint):
        return ServiceResult(ok=True, op=op, data=data)
    return ServiceResult.failure(
        op,
        "CONSTRAINT_FAILED",
        f"{data['value']!r} does not satisfy {rules}",
        **data,
    )
