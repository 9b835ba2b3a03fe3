"""
Exception classes with built-in guidance for build configuration loading.
"""
import sys


class BuildConfigException(Exception):
    """Base exception for all build configuration errors."""
    def __init__(self, message: str, error_type: str = None, project: str = None,
                 path: str = None, uri: str = None):
        super().__init__(message)
        self.error_type = error_type
        self.project = project
        self.path = path
        self.uri = uri
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Build configuration error: {self}
💡 Check config/build.yaml and your settings.gradle, then try again
"""


class BuildConfigFileException(BuildConfigException):
    """Raised when a YAML configuration file cannot be read or is invalid."""
    def __init__(self, message: str, path: str = None, **kwargs):
        super().__init__(message, error_type="config_file", path=path, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Could not load build configuration file '{self.path or 'unknown'}'
   {self}
💡 Make sure the file is valid YAML and only uses the keys
   output_root, primary_project and projects
"""


class ProjectDirectoryException(BuildConfigException):
    """Raised when the build root is missing or its settings file is unreadable."""
    def __init__(self, message: str, path: str, **kwargs):
        super().__init__(message, error_type="project_directory", path=path, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Cannot read the native build at {self.path}
   {self}
💡 Pass --project-dir pointing at the directory that holds settings.gradle(.kts),
   or run the command from inside that directory
"""


class MalformedRepositoryUriException(BuildConfigException):
    """Raised when a repository URI literal cannot be parsed."""
    def __init__(self, message: str, uri: str, **kwargs):
        super().__init__(message, error_type="malformed_uri", uri=uri, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Repository URI '{self.uri}' is malformed: {self}
💡 Repository endpoints must be absolute https:// URIs with a host name.
   This list is fixed and ships with multi-build, so this indicates a broken install:
   reinstall the package and try again
"""


class PrimaryProjectNotFoundException(BuildConfigException):
    """Raised when the primary application project is not part of the build."""
    def __init__(self, message: str, project: str, available: list = None, **kwargs):
        self.available = available or []
        super().__init__(message, error_type="primary_project_missing", project=project, **kwargs)

    def _generate_guidance(self):
        command = self._get_current_command()
        available = ', '.join(self.available) if self.available else 'none'
        return f"""
❌ Primary project '{self.project}' does not exist in this build
   Known subprojects: {available}
💡 Resolve this in one of the following ways:
   1. Include it in settings.gradle(.kts): include("{self.project}")
   2. Or list it under 'projects' in config/build.yaml
   3. Or point 'primary_project' in config/build.yaml at an existing subproject
   Then re-run: {command}
"""


class OutputDirectoryCollisionException(BuildConfigException):
    """Raised when two projects would share (or escape) an output directory."""
    def __init__(self, message: str, project: str, path: str = None, **kwargs):
        super().__init__(message, error_type="output_collision", project=project, path=path, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Project '{self.project}' cannot get its own output directory: {self}
💡 Every subproject writes to <output_root>/<name>, so subproject names must be
   unique, non-empty and must not contain path separators
"""


class EvaluationOrderException(BuildConfigException):
    """Raised when a project is evaluated before the projects it depends on."""
    def __init__(self, message: str, project: str, pending: list = None, **kwargs):
        self.pending = pending or []
        super().__init__(message, error_type="evaluation_order", project=project, **kwargs)

    def _generate_guidance(self):
        pending = ', '.join(self.pending) if self.pending else 'none'
        return f"""
❌ Project '{self.project}' cannot be evaluated yet: {self}
   Still waiting for: {pending}
"""


class CleanPermissionException(BuildConfigException):
    """Raised when the output directory cannot be deleted for lack of permissions."""
    def __init__(self, message: str, path: str, **kwargs):
        super().__init__(message, error_type="clean_permission", path=path, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Could not delete build output at {self.path}
   {self}
💡 Check the ownership and permissions of that directory (for example files
   left behind by a build that ran as another user), then re-run: invoke clean
"""
