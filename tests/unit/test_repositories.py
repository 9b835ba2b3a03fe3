import unittest
import tempfile
from pathlib import Path

from pydantic import ValidationError

from multi_build.build.config.exceptions import MalformedRepositoryUriException
from multi_build.build.config.models import Repository, RepositoryKind
from multi_build.build.config.repositories import load_repositories, parse_repository, validate_uri


EXPECTED_URIS = [
    "https://dl.google.com/dl/android/maven2/",
    "https://repo.maven.apache.org/maven2/",
    "https://plugins.gradle.org/m2/",
    "https://developer.huawei.com/repo/",
    "https://www.jitpack.io",
    "https://plugins.gradle.org/m2/",
]


class TestLoadRepositories(unittest.TestCase):
    """The packaged repository list."""

    def test_exact_endpoints_in_declaration_order(self):
        repositories = load_repositories()
        self.assertEqual(repositories.uris(), EXPECTED_URIS)

    def test_kinds_in_declaration_order(self):
        kinds = [repo.kind for repo in load_repositories().repositories]
        self.assertEqual(kinds, [
            RepositoryKind.GOOGLE,
            RepositoryKind.MAVEN_CENTRAL,
            RepositoryKind.GRADLE_PLUGIN_PORTAL,
            RepositoryKind.MAVEN,
            RepositoryKind.MAVEN,
            RepositoryKind.MAVEN,
        ])

    def test_loading_twice_gives_same_list(self):
        self.assertEqual(load_repositories(), load_repositories())

    def test_list_is_immutable(self):
        repositories = load_repositories()
        with self.assertRaises(ValidationError):
            repositories.repositories = ()
        self.assertIsInstance(repositories.repositories, tuple)
        with self.assertRaises(ValidationError):
            repositories.repositories[0].url = "https://example.com/"

    def test_malformed_literal_in_declarations_is_fatal(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "repositories.yaml"
            path.write_text("repositories:\n  - google\n  - maven: ftp://mirror.example.com/\n")
            with self.assertRaises(MalformedRepositoryUriException) as cm:
                load_repositories(path)
            self.assertEqual(cm.exception.uri, "ftp://mirror.example.com/")
            self.assertIn("ftp://mirror.example.com/", cm.exception.guidance)


class TestValidateUri(unittest.TestCase):

    def test_accepts_https_uri(self):
        self.assertEqual(validate_uri("https://www.jitpack.io"), "https://www.jitpack.io")

    def test_rejects_malformed_literals(self):
        for literal in ["", "http://repo.example.com/", "https:///repo", "https://[::1/repo",
                        "not a uri", "https://repo.example.com:port/", " https://repo.example.com/",
                        "https://repo.example.com/\tm2/", "https://repo.example.com/\nm2/"]:
            with self.subTest(literal=literal):
                with self.assertRaises(MalformedRepositoryUriException):
                    validate_uri(literal)


class TestParseRepository(unittest.TestCase):

    def test_shorthand(self):
        self.assertEqual(parse_repository("google"), Repository(kind=RepositoryKind.GOOGLE))

    def test_maven_entry(self):
        repo = parse_repository({"maven": "https://developer.huawei.com/repo/"})
        self.assertEqual(repo.kind, RepositoryKind.MAVEN)
        self.assertEqual(repo.uri, "https://developer.huawei.com/repo/")

    def test_unknown_declarations(self):
        for entry in ["jcenter", "maven", {"ivy": "https://example.com/"}, 42]:
            with self.subTest(entry=entry):
                with self.assertRaises(MalformedRepositoryUriException):
                    parse_repository(entry)
