import json
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from click.testing import CliRunner
from libfinder import cli_logger, config
from libfinder.main import cli


def touch(path, content=""):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        f.write(content)


class TestMain(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, config.CONFIG_FILE)
        self.include_dir = os.path.join(self.test_dir, "trt", "include")
        self.lib_dir = os.path.join(self.test_dir, "trt", "lib")
        self.sample_config = {
            "packages": {
                "FakeRT": {
                    "header": "NvInfer.h",
                    "library": "nvinfer",
                    "version_header": "NvInferVersion.h",
                    "version_macro_prefix": "NV_TENSORRT",
                    "include_dirs": [self.include_dir],
                    "library_dirs": [self.lib_dir],
                    "component_prefix": "nv",
                    "component_mapping": {"infer_plugin": "nvinfer_plugin"},
                }
            }
        }

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def install(self):
        touch(os.path.join(self.include_dir, "NvInfer.h"))
        touch(os.path.join(self.include_dir, "NvInferVersion.h"),
              "#define NV_TENSORRT_MAJOR 8\n#define NV_TENSORRT_MINOR 6\n")
        touch(os.path.join(self.lib_dir, "libnvinfer.so"))
        touch(os.path.join(self.lib_dir, "libnvonnxparser.so"))

    def invoke(self, *args):
        return self.runner.invoke(cli, ["--path", self.test_dir] + list(args))

    def test_config_view_not_found(self):
        """Test that viewing a non-existent config returns an error."""
        result = self.invoke("config", "view")
        self.assertIn("Error: No libfinder.toml found.", result.output)

    def test_config_view(self):
        """Test that viewing a config prints its content."""
        config.save_config(self.sample_config, path=self.test_dir)
        result = self.invoke("config", "view")
        with open(self.config_path, "r") as f:
            self.assertEqual(result.output.strip(), f.read().strip())

    @patch("click.edit")
    def test_config_edit(self, mock_edit):
        """Test that editing a config calls click.edit."""
        config.save_config(self.sample_config, path=self.test_dir)
        self.invoke("config", "edit")
        mock_edit.assert_called_once_with(filename=self.config_path)

    def test_find_text(self):
        self.install()
        config.save_config(self.sample_config, path=self.test_dir)
        result = self.invoke("find", "FakeRT", "-c", "onnxparser", "-c", "infer_plugin")
        self.assertEqual(result.exit_code, 0)
        self.assertIn(f"Found FakeRT: {os.path.join(self.lib_dir, 'libnvinfer.so')}", result.output)
        self.assertIn('(found version "8.6")', result.output)
        self.assertIn("infer_plugin: not found", result.output)

    def test_find_json(self):
        self.install()
        config.save_config(self.sample_config, path=self.test_dir)
        result = self.invoke("find", "FakeRT", "-c", "onnxparser", "--format", "json")
        self.assertEqual(result.exit_code, 0)
        data = json.loads(result.output)
        self.assertTrue(data["found"])
        self.assertEqual(data["version"], "8.6")
        self.assertEqual(data["targets"]["FakeRT::FakeRT"]["interface_link_libraries"], ["FakeRT::onnxparser"])

    def test_find_cmake(self):
        self.install()
        config.save_config(self.sample_config, path=self.test_dir)
        result = self.invoke("find", "FakeRT", "--format", "cmake")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("set(FakeRT_FOUND TRUE)", result.output)
        self.assertNotIn("INTERFACE_LINK_LIBRARIES", result.output)

    def test_find_extra_directories(self):
        self.install()
        config.save_config({"packages": {"FakeRT": {"header": "NvInfer.h", "library": "nvinfer"}}},
                           path=self.test_dir)
        result = self.invoke("find", "FakeRT", "-I", self.include_dir, "-L", self.lib_dir, "--format", "flags")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(),
                         f"-I{self.include_dir} {os.path.join(self.lib_dir, 'libnvinfer.so')}")

    def test_find_missing_package(self):
        config.save_config(self.sample_config, path=self.test_dir)
        result = self.invoke("find", "FakeRT")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Could NOT find FakeRT (missing: FakeRT_LIBRARY FakeRT_INCLUDE_DIR)", result.output)

    def test_find_required_missing_exits_non_zero(self):
        config.save_config(self.sample_config, path=self.test_dir)
        result = self.invoke("find", "FakeRT", "--required")
        self.assertEqual(result.exit_code, 1)

    def test_find_required_component(self):
        self.install()
        config.save_config(self.sample_config, path=self.test_dir)
        result = self.invoke("find", "FakeRT", "-r", "infer_plugin", "--required")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Could NOT find FakeRT (missing: infer_plugin)", result.output)

    def test_find_version_requirement(self):
        self.install()
        config.save_config(self.sample_config, path=self.test_dir)
        result = self.invoke("find", "FakeRT", "--version", "9", "--required")
        self.assertEqual(result.exit_code, 1)
        self.assertIn('Found unsuitable version "8.6"', result.output)

    def test_find_unknown_package(self):
        result = self.invoke("find", "NoSuchLib")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Unknown package", result.output)

    def test_list_packages(self):
        config.save_config(self.sample_config, path=self.test_dir)
        result = self.invoke("list-packages")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("TensorRT (built-in)", result.output)
        self.assertIn("infer_plugin -> nvinfer_plugin", result.output)
        self.assertIn("FakeRT (configured)", result.output)

    def test_doctor_ok(self):
        self.install()
        config.save_config(self.sample_config, path=self.test_dir)
        result = self.invoke("doctor")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Environment check completed successfully.", result.output)

    def test_doctor_missing(self):
        config.save_config(self.sample_config, path=self.test_dir)
        result = self.invoke("doctor")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Could NOT find FakeRT", result.output)

    def test_log_list(self):
        log_dir = os.path.join(self.test_dir, "logs")
        touch(os.path.join(log_dir, "libfinder_20260101_000000.log"), "[12:00:00] [INFO] hello\n")
        with patch.object(cli_logger, "LOG_DIR", log_dir):
            result = self.runner.invoke(cli, ["log", "--list"])
            self.assertIn("libfinder_20260101_000000.log", result.output)
            result = self.runner.invoke(cli, ["log"])
            self.assertIn("[INFO] hello", result.output)

    def test_version(self):
        with patch("importlib.metadata.version", return_value="0.1.0"):
            result = self.runner.invoke(cli, ["version"])
        self.assertIn("libfinder version 0.1.0", result.output)

if __name__ == "__main__":
    unittest.main()
