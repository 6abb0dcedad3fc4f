from enum import Enum


class ResourceKind(Enum):
    RELEASE_ARTIFACT = "release-artifact"
