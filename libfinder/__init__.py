from .finder import find_package
from .packages import PackageDefinition, TENSORRT, get_package_definition
from .utils import ResolutionResult, TargetDescriptor, ComponentHandle, VersionInfo, handle_standard_args
