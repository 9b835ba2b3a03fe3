import io
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from invoke import Context

from multi_build.build.config.exceptions import CleanPermissionException
from multi_build.build.tasks.clean import clean, clean_output_directory
from .base import BaseBuildTest


class TestCleanOutputDirectory(BaseBuildTest):
    """Deleting the relocated output root."""

    def test_removes_directory_recursively(self):
        root = self.make_build_output()
        result = clean_output_directory(root)
        self.assertEqual(result.code, "CLEAN_REMOVED")
        self.assertTrue(result.removed)
        self.assertFalse(root.exists())

    def test_second_clean_is_a_no_op(self):
        root = self.make_build_output()
        clean_output_directory(root)
        result = clean_output_directory(root)
        self.assertEqual(result.code, "CLEAN_NO_OP")
        self.assertFalse(result.removed)
        self.assertEqual(result.path, str(root))

    def test_missing_directory_is_not_an_error(self):
        result = clean_output_directory(self.workspace / "never-built")
        self.assertEqual(result.code, "CLEAN_NO_OP")

    def test_leaves_siblings_alone(self):
        root = self.make_build_output()
        clean_output_directory(root)
        self.assertTrue(self.root_dir.exists())

    def test_plain_file_at_output_root_is_removed(self):
        target = self.workspace / "build"
        target.write_text("stale")
        result = clean_output_directory(target)
        self.assertTrue(result.removed)
        self.assertFalse(target.exists())

    def test_permission_failure_is_reported(self):
        root = self.make_build_output()
        with mock.patch("multi_build.build.tasks.clean.shutil.rmtree",
                        side_effect=PermissionError(13, "Permission denied", str(root))):
            with self.assertRaises(CleanPermissionException) as cm:
                clean_output_directory(root)
        self.assertEqual(cm.exception.path, str(root))
        self.assertIsInstance(cm.exception.__cause__, PermissionError)
        self.assertTrue(root.exists())

    def test_directory_vanishing_mid_clean_is_a_no_op(self):
        root = self.make_build_output()
        with mock.patch("multi_build.build.tasks.clean.shutil.rmtree",
                        side_effect=FileNotFoundError(2, "No such file or directory")):
            result = clean_output_directory(root)
        self.assertEqual(result.code, "CLEAN_NO_OP")


class TestCleanTask(BaseBuildTest):
    """The invoke task registered as `clean`."""

    def setUp(self):
        super().setUp()
        self.write_settings_gradle(":app", ":lib")

    def run_clean(self):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            result = clean(Context(), project_dir=str(self.root_dir))
        return result, stdout.getvalue(), stderr.getvalue()

    def test_clean_twice_in_succession(self):
        root = self.make_build_output()

        first, out, _ = self.run_clean()
        self.assertEqual(first.code, "CLEAN_REMOVED")
        self.assertIn(str(root), out)
        self.assertFalse(root.exists())

        second, out, _ = self.run_clean()
        self.assertEqual(second.code, "CLEAN_NO_OP")
        self.assertIn("Nothing to clean", out)

    def test_clean_honours_relocated_root(self):
        target = self.workspace / "custom-out"
        self.write_app_config(output_root=str(target))
        self.make_build_output(target)
        default_root = self.make_build_output()

        result, _, _ = self.run_clean()
        self.assertEqual(result.path, str(target))
        self.assertFalse(target.exists())
        self.assertTrue(default_root.exists())

    def test_permission_failure_exits_non_zero(self):
        self.make_build_output()
        stderr = io.StringIO()
        with mock.patch("multi_build.build.tasks.clean.shutil.rmtree",
                        side_effect=PermissionError(13, "Permission denied")):
            with redirect_stdout(io.StringIO()), redirect_stderr(stderr):
                with self.assertRaises(SystemExit) as cm:
                    clean(Context(), project_dir=str(self.root_dir))
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("Could not delete build output", stderr.getvalue())

    def test_configuration_error_exits_non_zero(self):
        self.write_app_config(primary_project=":missing")
        stderr = io.StringIO()
        with redirect_stdout(io.StringIO()), redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as cm:
                clean(Context(), project_dir=str(self.root_dir))
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("':missing' does not exist", stderr.getvalue())

    def test_missing_project_directory_exits_non_zero(self):
        stderr = io.StringIO()
        with redirect_stdout(io.StringIO()), redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as cm:
                clean(Context(), project_dir=str(self.workspace / "typo"))
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("Cannot read the native build", stderr.getvalue())
