"""
Pydantic models for the build configuration loader.

Every model is frozen: a loaded BuildConfiguration is handed to tasks and
subproject setup steps by reference and never changes after load.
"""
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple
from pydantic import BaseModel, ConfigDict


class RepositoryKind(str, Enum):
    """Kinds of package repository a build can declare."""
    GOOGLE = "google"
    MAVEN_CENTRAL = "mavenCentral"
    GRADLE_PLUGIN_PORTAL = "gradlePluginPortal"
    MAVEN = "maven"


# Endpoints behind the shorthand repository declarations
WELL_KNOWN_URIS = {
    RepositoryKind.GOOGLE: "https://dl.google.com/dl/android/maven2/",
    RepositoryKind.MAVEN_CENTRAL: "https://repo.maven.apache.org/maven2/",
    RepositoryKind.GRADLE_PLUGIN_PORTAL: "https://plugins.gradle.org/m2/",
}


class Repository(BaseModel):
    """A single package repository."""
    model_config = ConfigDict(frozen=True)

    kind: RepositoryKind
    url: Optional[str] = None

    @property
    def uri(self) -> str:
        """Resolved endpoint for this repository."""
        if self.kind == RepositoryKind.MAVEN:
            return self.url
        return WELL_KNOWN_URIS[self.kind]


class RepositoryList(BaseModel):
    """Ordered repositories; earlier entries win during dependency resolution."""
    model_config = ConfigDict(frozen=True)

    repositories: Tuple[Repository, ...] = ()

    def uris(self) -> List[str]:
        return [repo.uri for repo in self.repositories]

    def __len__(self) -> int:
        return len(self.repositories)


class Project(BaseModel):
    """A project taking part in the build."""
    model_config = ConfigDict(frozen=True)

    name: str
    path: str  # Gradle-style path, e.g. ":app" (":" for the root project)
    directory: Path


class ProjectRegistry(BaseModel):
    """The root project and its subprojects, in declaration order."""
    model_config = ConfigDict(frozen=True)

    root: Project
    subprojects: Tuple[Project, ...] = ()

    def find(self, path: str) -> Optional[Project]:
        """Look up a subproject by path (":app") or bare name ("app")."""
        from .projects import normalize_project_path
        wanted = normalize_project_path(path)
        for project in self.subprojects:
            if project.path == wanted:
                return project
        return None

    def paths(self) -> List[str]:
        return [project.path for project in self.subprojects]


class DirectoryMapping(BaseModel):
    """Output directory of the root project and of every subproject."""
    model_config = ConfigDict(frozen=True)

    root: Path
    subprojects: Dict[str, Path] = {}

    def for_project(self, path: str) -> Path:
        """
        Get the output directory for a project.

        Args:
            path: Project path (":" or ":app") or bare subproject name

        Raises:
            KeyError: If the project is unknown
        """
        if path == ":":
            return self.root
        from .projects import normalize_project_path
        return self.subprojects[normalize_project_path(path)]


class EvaluationOrderConstraint(BaseModel):
    """Directed edges (before, after): `after` is evaluated only once `before` is."""
    model_config = ConfigDict(frozen=True)

    primary: str
    edges: Tuple[Tuple[str, str], ...] = ()

    def prerequisites(self, path: str) -> Set[str]:
        """Projects that must be evaluated before `path`."""
        return {before for before, after in self.edges if after == path}

    def allows(self, path: str, evaluated: Set[str]) -> bool:
        return self.prerequisites(path) <= set(evaluated)


class TaskRegistration(BaseModel):
    """A task registered while loading the configuration."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    target: Path


class BuildConfiguration(BaseModel):
    """Everything the loader produced, in load order."""
    model_config = ConfigDict(frozen=True)

    registry: ProjectRegistry
    repositories: RepositoryList
    directories: DirectoryMapping
    evaluation: EvaluationOrderConstraint
    tasks: Tuple[TaskRegistration, ...] = ()

    def task(self, name: str) -> Optional[TaskRegistration]:
        for registration in self.tasks:
            if registration.name == name:
                return registration
        return None


class CleanResult(BaseModel):
    """Outcome of deleting the build output directory."""
    code: str  # CLEAN_REMOVED or CLEAN_NO_OP
    path: str
    removed: bool
