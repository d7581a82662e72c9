"""Tests for the configuration module."""

import os
import shutil
import tempfile
import unittest

from slotlog.config import Config, load_config, load_yaml_config

ENV_KEYS = ("ACCESS_LOG_PATH", "APP_LOG_PATH", "MAX_FILE_SIZE_BYTES",
            "MAX_FILE_SIZE_MB", "WRITE_BUFFER_SIZE")


class TestConfigDefaults(unittest.TestCase):
    def test_default_values(self):
        cfg = Config()
        self.assertEqual(cfg.access_log_path, "./logs/access.log")
        self.assertEqual(cfg.app_log_path, "./logs/app.log")
        self.assertEqual(cfg.max_file_size_bytes, 104857600)
        self.assertEqual(cfg.buffer_size, 8192)

    def test_frozen(self):
        cfg = Config()
        with self.assertRaises(AttributeError):
            cfg.app_log_path = "/tmp/x.log"


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self._orig_env = os.environ.copy()
        for key in ENV_KEYS:
            os.environ.pop(key, None)

    def tearDown(self):
        os.environ.clear()
        os.environ.update(self._orig_env)

    def test_defaults_without_env(self):
        self.assertEqual(load_config(), Config())

    def test_env_var_overrides(self):
        os.environ["ACCESS_LOG_PATH"] = "/var/log/svc/access.log"
        os.environ["APP_LOG_PATH"] = "/var/log/svc/app.log"
        os.environ["MAX_FILE_SIZE_MB"] = "20"
        os.environ["WRITE_BUFFER_SIZE"] = "65536"
        cfg = load_config()
        self.assertEqual(cfg.access_log_path, "/var/log/svc/access.log")
        self.assertEqual(cfg.app_log_path, "/var/log/svc/app.log")
        self.assertEqual(cfg.max_file_size_bytes, 20 * 1024 * 1024)
        self.assertEqual(cfg.buffer_size, 65536)

    def test_non_positive_size_rejected(self):
        os.environ["MAX_FILE_SIZE_BYTES"] = "0"
        with self.assertRaises(ValueError):
            load_config()
        del os.environ["MAX_FILE_SIZE_BYTES"]
        with self.assertRaises(ValueError):
            load_config({"max_file_size_bytes": -5})

    def test_max_file_size_bytes_precedence(self):
        os.environ["MAX_FILE_SIZE_BYTES"] = "2048"
        os.environ["MAX_FILE_SIZE_MB"] = "50"
        self.assertEqual(load_config().max_file_size_bytes, 2048)

    def test_yaml_values_used_when_env_unset(self):
        cfg = load_config({"app_log_path": "y/app.log", "max_file_size_bytes": 4096,
                           "buffer_size": 1024})
        self.assertEqual(cfg.app_log_path, "y/app.log")
        self.assertEqual(cfg.access_log_path, "./logs/access.log")
        self.assertEqual(cfg.max_file_size_bytes, 4096)
        self.assertEqual(cfg.buffer_size, 1024)

    def test_env_beats_yaml(self):
        os.environ["APP_LOG_PATH"] = "env/app.log"
        os.environ["MAX_FILE_SIZE_BYTES"] = "10"
        cfg = load_config({"app_log_path": "y/app.log", "max_file_size_bytes": 4096})
        self.assertEqual(cfg.app_log_path, "env/app.log")
        self.assertEqual(cfg.max_file_size_bytes, 10)


class TestLoadYamlConfig(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_no_path(self):
        self.assertEqual(load_yaml_config(None), {})

    def test_missing_file(self):
        self.assertEqual(load_yaml_config(os.path.join(self.tmpdir, "nope.yaml")), {})

    def test_reads_mapping(self):
        path = os.path.join(self.tmpdir, "slot.yaml")
        with open(path, "w") as f:
            f.write("app_log_path: logs/service.log\nmax_file_size_bytes: 1048576\n")
        self.assertEqual(load_yaml_config(path), {
            "app_log_path": "logs/service.log",
            "max_file_size_bytes": 1048576,
        })

    def test_empty_file(self):
        path = os.path.join(self.tmpdir, "empty.yaml")
        open(path, "w").close()
        self.assertEqual(load_yaml_config(path), {})


if __name__ == "__main__":
    unittest.main()
