"""
Package repository declarations.

The repository list is fixed: it is read from repositories.yaml shipped
with this package, in file order, and validated before use.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional
from urllib.parse import urlparse

import yaml

from .exceptions import BuildConfigFileException, MalformedRepositoryUriException
from .models import Repository, RepositoryKind, RepositoryList, WELL_KNOWN_URIS

logger = logging.getLogger(__name__)

REPOSITORIES_FILE = Path(__file__).parent / "repositories.yaml"


def validate_uri(literal: str) -> str:
    """
    Check that a repository URI literal is usable.

    Args:
        literal: URI as written in the declaration

    Returns:
        The literal, unchanged

    Raises:
        MalformedRepositoryUriException: If the literal is not an absolute https URI
    """
    if not isinstance(literal, str) or not literal or any(c.isspace() for c in literal):
        raise MalformedRepositoryUriException("URI must be a non-empty string without whitespace", uri=str(literal))

    try:
        parsed = urlparse(literal)
        # Accessing port validates it
        parsed.port
    except ValueError as e:
        raise MalformedRepositoryUriException(f"Could not parse URI: {e}", uri=literal) from e

    if parsed.scheme != "https":
        raise MalformedRepositoryUriException(f"Unsupported scheme '{parsed.scheme}'", uri=literal)
    if not parsed.hostname:
        raise MalformedRepositoryUriException("URI has no host", uri=literal)
    return literal


def parse_repository(entry: Any) -> Repository:
    """
    Turn one declaration from repositories.yaml into a Repository.

    Shorthand entries are plain strings ("google"); remote endpoints are
    written as {"maven": "<https uri>"}.
    """
    if isinstance(entry, str):
        try:
            kind = RepositoryKind(entry)
        except ValueError:
            raise MalformedRepositoryUriException(f"Unknown repository shorthand '{entry}'", uri=entry)
        if kind == RepositoryKind.MAVEN:
            raise MalformedRepositoryUriException("maven repositories need a url", uri=entry)
        validate_uri(WELL_KNOWN_URIS[kind])
        return Repository(kind=kind)

    if isinstance(entry, dict) and list(entry) == [RepositoryKind.MAVEN.value]:
        url = validate_uri(entry[RepositoryKind.MAVEN.value])
        return Repository(kind=RepositoryKind.MAVEN, url=url)

    raise MalformedRepositoryUriException(f"Unrecognised repository declaration: {entry!r}", uri=str(entry))


def load_repositories(path: Optional[Path] = None) -> RepositoryList:
    """
    Load the repository list used to resolve external build dependencies.

    Args:
        path: Declarations file (defaults to the packaged repositories.yaml)

    Returns:
        Immutable RepositoryList in declaration order

    Raises:
        MalformedRepositoryUriException: If any URI literal is malformed
        BuildConfigFileException: If the declarations file cannot be read
    """
    path = path or REPOSITORIES_FILE
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise BuildConfigFileException(f"Could not read repository declarations: {e}", path=str(path)) from e

    entries: List[Any] = data.get('repositories', []) if isinstance(data, dict) else []
    repositories = RepositoryList(repositories=tuple(parse_repository(entry) for entry in entries))

    logger.debug(f"Loaded {len(repositories)} repositories from {path}")
    return repositories
