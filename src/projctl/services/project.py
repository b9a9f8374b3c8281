"""ProjectService — validated project creation and listing.

Every submitted field is checked with :func:`validate` against the
``[form]`` constraints before anything reaches the store. Invalid input
becomes an ``INVALID_INPUT`` ServiceResult; the store is left untouched.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from projctl.config.models import FormConfig
from projctl.domain.projects import filter_by_status
from projctl.domain.types import ProjectStatus
from projctl.domain.validation import Constraint, validate
from projctl.services.result import ServiceResult

if TYPE_CHECKING:
    from projctl.services.store import ProjectStore

logger = logging.getLogger(__name__)


def coerce_people(raw: Any) -> int | float:
    """Turn submitted people input into a number.

    Unparseable input becomes NaN, which fails any range rule.
    """
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        try:
            return float(str(raw).strip())
        except ValueError:
            return math.nan


class ProjectService:
    """Project operations over an injected :class:`ProjectStore`."""

    def __init__(self, store: ProjectStore, form: FormConfig | None = None) -> None:
        self._store = store
        self._form = form or FormConfig()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def build_constraints(
        self,
        title: str,
        people: int | float,
        description: str | None,
    ) -> dict[str, Constraint]:
        """Field name -> Constraint for one submission.

        Description is only checked when supplied.
        """
        form = self._form
        constraints = {
            "title": Constraint(
                value=title,
                required=True,
                max_length=form.title_max_length,
            ),
            "people": Constraint(
                value=people,
                required=True,
                min=form.people_min,
                max=form.people_max,
            ),
        }
        if description is not None:
            constraints["description"] = Constraint(
                value=description,
                required=False,
                min_length=form.description_min_length,
            )
        return constraints

    def invalid_fields(
        self,
        title: str,
        people: int | float,
        description: str | None = None,
    ) -> list[str]:
        """Names of the fields that fail their constraints."""
        constraints = self.build_constraints(title, people, description)
        return [name for name, c in constraints.items() if not validate(c)]

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def create_project(
        self,
        title: str,
        people: Any,
        description: str | None = None,
    ) -> ServiceResult:
        """Validate one submission and add it to the store."""
        op = "create_project"
        number = coerce_people(people)
        failed = self.invalid_fields(title, number, description)
        if failed:
            logger.debug("Rejected project input: %s", failed)
            return ServiceResult.failure(
                op,
                "INVALID_INPUT",
                f"Invalid input: {', '.join(failed)}",
                fields=failed,
            )

        record = self._store.add_project(title, int(number), description)
        return ServiceResult(ok=True, op=op, data=record.to_dict())

    def create_batch(
        self,
        items: Sequence[Mapping[str, Any]],
        *,
        partial: bool = False,
    ) -> ServiceResult:
        """Validate and add many submissions.

        All-or-nothing unless *partial*: one invalid item means nothing is
        added. With *partial*, valid items are added and the rest reported.
        A title that is missing or not text counts as a failing ``title``.

        Only validation is all-or-nothing. Items are added one by one, so if
        a store listener raises partway through, the items added before it
        stay in the store.
        """
        op = "create_batch"
        errors: list[dict[str, Any]] = []
        accepted: list[tuple[str, int | float, str | None]] = []

        for index, item in enumerate(items):
            if not isinstance(item, Mapping):
                errors.append({"index": index, "fields": ["item"]})
                continue
            title = item.get("title")
            if not isinstance(title, str):
                title = ""
            number = coerce_people(item.get("people", ""))
            description = item.get("description")
            if description is not None:
                description = str(description)
            failed = self.invalid_fields(title, number, description)
            if failed:
                errors.append({"index": index, "fields": failed})
            else:
                accepted.append((title, number, description))

        if errors and not partial:
            return ServiceResult.failure(
                op,
                "INVALID_INPUT",
                f"{len(errors)} of {len(items)} items failed validation",
                errors=errors,
            )

        created = [
            self._store.add_project(title, int(number), description).to_dict()
            for title, number, description in accepted
        ]
        warnings = [f"Item {e['index']} skipped: invalid {', '.join(e['fields'])}" for e in errors]
        return ServiceResult(
            ok=True,
            op=op,
            data={"created": created, "errors": errors},
            warnings=warnings,
            meta={"added": len(created), "failed": len(errors)},
        )

    def list_projects(self, status: ProjectStatus | str | None = None) -> ServiceResult:
        """Return the current snapshot, optionally filtered by status."""
        records = self._store.projects
        if status is not None:
            records = filter_by_status(records, ProjectStatus(status))
        return ServiceResult(
            ok=True,
            op="list_projects",
            data={
                "items": [r.to_dict() for r in records],
                "count": len(records),
            },
        )
