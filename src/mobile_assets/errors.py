"""Error kinds raised by the validation and generation pipeline."""

from __future__ import annotations


class MobileAssetsError(Exception):
    """Base class for every failure that terminates a run."""


class PlatformsConfigError(MobileAssetsError):
    pass


class ProbeError(MobileAssetsError):
    """A platform root could not be probed for a reason other than "not found"."""


class NoPlatformsError(MobileAssetsError):
    def __init__(self) -> None:
        super().__init__(
            "No Cordova platforms found. Make sure you have specified the correct "
            "config file location (or you're in the root directory of your project) "
            "and you've added platforms with 'cordova platform add'"
        )


class MissingConfigError(MobileAssetsError):
    pass


class NoAssetsError(MobileAssetsError):
    def __init__(self) -> None:
        super().__init__("At least one asset type should be specified")


class ProjectDescriptorError(MobileAssetsError):
    """The project name could not be extracted from config.xml."""


class ReadError(ProjectDescriptorError):
    pass


class ParseError(ProjectDescriptorError):
    pass


class SchemaError(ProjectDescriptorError):
    pass


class ResizeError(MobileAssetsError):
    pass
