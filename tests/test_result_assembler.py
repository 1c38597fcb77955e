import unittest
from libfinder.utils.component_resolver import ComponentHandle
from libfinder.utils.result_assembler import assemble
from libfinder.utils.version_extractor import VersionInfo

INCLUDE = "/opt/trt/include"
LIBRARY = "/opt/trt/lib/libnvinfer.so"


def handle(name, library_path=None):
    return ComponentHandle(name=name, found=library_path is not None, library_path=library_path,
                           include_path=INCLUDE, is_registered_target=library_path is not None)


class TestResultAssembler(unittest.TestCase):

    def test_found_without_components(self):
        result = assemble("TensorRT", INCLUDE, LIBRARY, VersionInfo((8, 6, 1, 6)), {})
        self.assertTrue(result.found)
        self.assertEqual(result.version_string, "8.6.1.6")
        self.assertEqual(result.include_dirs, frozenset([INCLUDE]))
        self.assertEqual(result.libraries, frozenset([LIBRARY]))
        self.assertEqual(result.components, {})
        self.assertEqual(result.primary_target.name, "TensorRT::TensorRT")
        self.assertEqual(result.primary_target.imported_location, LIBRARY)
        self.assertEqual(result.primary_target.interface_link_libraries, ())
        self.assertNotIn("", result.primary_target.interface_link_libraries)
        self.assertEqual(list(result.targets), ["TensorRT::TensorRT"])

    def test_components_become_targets(self):
        components = {
            "onnxparser": handle("onnxparser", "/opt/trt/lib/libnvonnxparser.so"),
            "infer_plugin": handle("infer_plugin"),
        }
        result = assemble("TensorRT", INCLUDE, LIBRARY, VersionInfo((8, 6)), components)
        self.assertEqual(result.primary_target.interface_link_libraries, ("TensorRT::onnxparser",))
        self.assertEqual(list(result.targets), ["TensorRT::TensorRT", "TensorRT::onnxparser"])
        parser = result.targets["TensorRT::onnxparser"]
        self.assertEqual(parser.imported_location, "/opt/trt/lib/libnvonnxparser.so")
        self.assertEqual(parser.interface_include_dirs, frozenset([INCLUDE]))
        self.assertFalse(result.components["infer_plugin"].found)

    def test_missing_library(self):
        result = assemble("TensorRT", INCLUDE, None, VersionInfo((8,)), {})
        self.assertFalse(result.found)
        self.assertEqual(result.missing, ("TensorRT_LIBRARY",))
        self.assertEqual(result.libraries, frozenset())
        self.assertEqual(result.targets, {})

    def test_missing_everything(self):
        result = assemble("TensorRT", None, None, None, {})
        self.assertFalse(result.found)
        self.assertEqual(result.missing, ("TensorRT_LIBRARY", "TensorRT_INCLUDE_DIR"))
        self.assertEqual(result.version, VersionInfo())
        self.assertEqual(result.primary_target.interface_include_dirs, frozenset())

    def test_assembly_is_deterministic(self):
        components = {"onnxparser": handle("onnxparser", "/opt/trt/lib/libnvonnxparser.so")}
        first = assemble("TensorRT", INCLUDE, LIBRARY, VersionInfo((8, 6)), components)
        second = assemble("TensorRT", INCLUDE, LIBRARY, VersionInfo((8, 6)), dict(components))
        self.assertEqual(first, second)

if __name__ == "__main__":
    unittest.main()
