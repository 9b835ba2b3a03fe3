"""
Evaluation order between projects.

Every subproject is configured after the primary application project.
EvaluationTracker checks an actual evaluation sequence against that rule.
"""

import logging
from typing import List, Set

from .exceptions import EvaluationOrderException, PrimaryProjectNotFoundException
from .models import EvaluationOrderConstraint, ProjectRegistry
from .projects import normalize_project_path

logger = logging.getLogger(__name__)


def constrain_evaluation_order(registry: ProjectRegistry, primary_project: str) -> EvaluationOrderConstraint:
    """
    Make every subproject evaluate after the primary project.

    Args:
        registry: Projects taking part in the build
        primary_project: Path or name of the primary project (":app" or "app")

    Returns:
        Constraint with one (primary, subproject) edge per other subproject

    Raises:
        PrimaryProjectNotFoundException: If the primary project is not a subproject
    """
    primary = registry.find(primary_project)
    if primary is None:
        raise PrimaryProjectNotFoundException(
            f"No subproject named '{primary_project}'",
            project=normalize_project_path(primary_project),
            available=registry.paths(),
        )

    # The primary project is a subproject too; it gets no edge to itself
    edges = tuple(
        (primary.path, project.path)
        for project in registry.subprojects
        if project.path != primary.path
    )
    logger.debug(f"{len(edges)} subprojects evaluate after {primary.path}")
    return EvaluationOrderConstraint(primary=primary.path, edges=edges)


def evaluation_order(registry: ProjectRegistry, constraint: EvaluationOrderConstraint) -> List[str]:
    """A valid evaluation order: root, primary, then the rest in declaration order."""
    order = [registry.root.path, constraint.primary]
    order.extend(path for path in registry.paths() if path != constraint.primary)
    return order


class EvaluationTracker:
    """Records project evaluations and rejects ones that come too early."""

    def __init__(self, constraint: EvaluationOrderConstraint):
        self.constraint = constraint
        self.evaluated: Set[str] = set()
        self.history: List[str] = []

    def can_evaluate(self, project: str) -> bool:
        return self.constraint.allows(normalize_project_path(project), self.evaluated)

    def evaluate(self, project: str) -> None:
        """
        Mark a project as evaluated.

        Raises:
            EvaluationOrderException: If a prerequisite has not been evaluated yet,
                or the project was already evaluated
        """
        path = normalize_project_path(project)
        if path in self.evaluated:
            raise EvaluationOrderException("project was already evaluated", project=path)

        pending = sorted(self.constraint.prerequisites(path) - self.evaluated)
        if pending:
            raise EvaluationOrderException(
                "prerequisites are not evaluated yet", project=path, pending=pending
            )

        self.evaluated.add(path)
        self.history.append(path)
        logger.debug(f"Evaluated {path}")
