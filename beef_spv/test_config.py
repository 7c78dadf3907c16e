import json
import os
import shutil
import tempfile
import unittest

from beef_spv.config import Config, MonitoringConfig, OracleConfig, SPVConfig


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_defaults(self):
        config = Config.default()
        self.assertEqual(config.spv.max_ancestor_depth, 128)
        self.assertTrue(config.spv.verify_scripts)
        self.assertEqual(config.oracle.url, "")
        self.assertIsNone(config.oracle.auth_token)
        self.assertFalse(config.monitoring.enabled)
        self.assertEqual(config.monitoring.port, 9090)

    def test_file_round_trip(self):
        config = Config(
            spv=SPVConfig(max_ancestor_depth=16, verify_scripts=False),
            oracle=OracleConfig(url="https://headers.example.com/verify", timeout=2.0, auth_token="t0k3n"),
            monitoring=MonitoringConfig(enabled=True, port=9191),
        )
        path = os.path.join(self.test_dir, "conf", "beef_spv.json")
        config.to_file(path)

        self.assertEqual(Config.from_file(path), config)

    def test_partial_file_keeps_defaults(self):
        path = os.path.join(self.test_dir, "partial.json")
        with open(path, 'w') as f:
            json.dump({'oracle': {'url': "http://localhost:8080/verify"}}, f)

        config = Config.from_file(path)
        self.assertEqual(config.oracle.url, "http://localhost:8080/verify")
        self.assertEqual(config.oracle.timeout, 10.0)
        self.assertEqual(config.spv, SPVConfig())

    def test_to_dict(self):
        data = Config.default().to_dict()
        self.assertEqual(set(data), {'spv', 'oracle', 'monitoring'})
        self.assertEqual(data['spv'], {'max_ancestor_depth': 128, 'verify_scripts': True})

    def test_unknown_key_rejected(self):
        with self.assertRaises(TypeError):
            Config.from_dict({'spv': {'max_depth': 3}})


if __name__ == '__main__':
    unittest.main()
