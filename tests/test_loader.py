
# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import unittest
from unittest.mock import patch, MagicMock
import os
import shutil
import tempfile

import requests

from cv_gallery import loader
from cv_gallery.loader import CVLoadError


class TestLoader(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _write(self, name, content):
        path = os.path.join(self.test_dir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_load_cv_from_file(self):
        path = self._write("CV.yaml", "cv:\n  name: Jane Doe\n  sections:\n    about: Hi\n")
        data = loader.load_cv(path)
        self.assertEqual(data["cv"]["name"], "Jane Doe")
        self.assertEqual(data["cv"]["sections"]["about"], "Hi")

    def test_missing_file(self):
        with self.assertRaises(CVLoadError) as ctx:
            loader.load_cv(os.path.join(self.test_dir, "nonexistent.yaml"))
        self.assertIn("nonexistent.yaml", str(ctx.exception))

    def test_invalid_yaml(self):
        path = self._write("broken.yaml", "cv:\n  name: [unclosed\n")
        with self.assertRaises(CVLoadError) as ctx:
            loader.load_cv(path)
        self.assertIn("Invalid YAML", str(ctx.exception))

    def test_invalid_encoding(self):
        path = os.path.join(self.test_dir, "latin1.yaml")
        with open(path, 'wb') as f:
            f.write(b"cv:\n  name: \xff\xfe\n")
        with self.assertRaises(CVLoadError) as ctx:
            loader.load_cv(path)
        self.assertIn("latin1.yaml", str(ctx.exception))

    def test_non_mapping_root(self):
        with self.assertRaises(CVLoadError):
            loader.parse_cv_yaml("- just\n- a list\n")

    def test_empty_document(self):
        self.assertEqual(loader.parse_cv_yaml(""), {})

    @patch('cv_gallery.loader.requests.get')
    def test_load_cv_from_url(self, mock_get):
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = "cv:\n  name: Remote Jane\n"
        mock_get.return_value = mock_response

        data = loader.load_cv("https://example.com/CV.yaml", ca_bundle="/path/ca.pem")
        self.assertEqual(data["cv"]["name"], "Remote Jane")
        mock_get.assert_called_once_with("https://example.com/CV.yaml",
                                         timeout=loader.REQUEST_TIMEOUT, verify="/path/ca.pem")

    @patch('cv_gallery.loader.requests.get')
    def test_http_error(self, mock_get):
        mock_response = MagicMock()
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Not Found")
        mock_get.return_value = mock_response

        with self.assertRaises(CVLoadError) as ctx:
            loader.load_cv("https://example.com/missing.yaml")
        self.assertIn("404", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
