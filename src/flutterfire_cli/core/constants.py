"""Platform and firebase.json keys shared across the CLI."""

from enum import Enum

# Platform keys
WINDOWS = "windows"
MACOS = "macos"
LINUX = "linux"
# Also the iOS key inside firebase.json
IOS = "ios"
ANDROID = "android"
WEB = "web"

SUPPORTED_PLATFORMS = (ANDROID, IOS, MACOS, WEB, WINDOWS, LINUX)

# firebase.json keys
FIREBASE_JSON_FILENAME = "firebase.json"
FLUTTER = "flutter"
PLATFORMS = "platforms"
BUILD_CONFIGURATIONS = "buildConfigurations"
TARGETS = "targets"
UPLOAD_DEBUG_SYMBOLS = "uploadDebugSymbols"
APP_ID = "appId"
PROJECT_ID = "projectId"
SERVICE_FILE_OUTPUT = "serviceFileOutput"
DEFAULT_CONFIG = "default"

# Platforms that get an entry in the canonical flutter block
FIREBASE_JSON_PLATFORMS = (IOS, MACOS)


class ProjectConfiguration(str, Enum):
    """Namespaces an Apple platform entry can be configured under."""

    TARGET = "target"
    BUILD_CONFIGURATION = "buildConfiguration"
    DEFAULT_CONFIG = "defaultConfig"


_PROJECT_CONFIGURATION_PROPERTIES = {
    ProjectConfiguration.TARGET: TARGETS,
    ProjectConfiguration.BUILD_CONFIGURATION: BUILD_CONFIGURATIONS,
    ProjectConfiguration.DEFAULT_CONFIG: DEFAULT_CONFIG,
}


def get_project_configuration_property(
    project_configuration: ProjectConfiguration,
) -> str:
    """Map a ProjectConfiguration to its firebase.json key.

    Args:
        project_configuration: Namespace to look up.

    Returns:
        The key used for that namespace inside a platform entry.
    """
    return _PROJECT_CONFIGURATION_PROPERTIES[ProjectConfiguration(project_configuration)]
