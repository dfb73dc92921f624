import enum


@enum.unique
class PlatformTypes(enum.Enum):
    WINDOWS = 'windows'
    LINUX = 'linux'


PLATFORM_OPTIONS = [platform.value for platform in PlatformTypes]
