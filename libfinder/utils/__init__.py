from .path_resolver import DiscoveryResult, find_first_existing, find_path, find_library, library_filenames
from .version_extractor import VersionInfo, extract_version, locate_version_header, parse_version_text
from .component_resolver import ComponentSpec, ComponentHandle, map_component_name, resolve_components
from .result_assembler import TargetDescriptor, ResolutionResult, assemble
from .standard_args import handle_standard_args
