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

import requests

from cvision import ingest, network


def page(body: bytes):
    response = MagicMock()
    response.content = body
    return response


class NetworkTestCase(unittest.TestCase):
    def setUp(self):
        network.set_ca_bundle(None)
        self.addCleanup(network.set_ca_bundle, None)


class TestCaBundle(NetworkTestCase):

    def test_default_trust_store(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(network.ca_bundle())
            self.assertIs(network.open_session().verify, True)

    def test_project_variable_first(self):
        with patch.dict(os.environ, {
            "SSL_CERT_FILE": "/path/ssl.pem",
            "REQUESTS_CA_BUNDLE": "/path/requests.pem",
            "CVISION_CA_BUNDLE": "/path/cvision.pem",
        }, clear=True):
            self.assertEqual(network.ca_bundle(), "/path/cvision.pem")

    def test_generic_variables_in_order(self):
        with patch.dict(os.environ, {"SSL_CERT_FILE": "/path/ssl.pem", "CURL_CA_BUNDLE": "/path/curl.pem"}, clear=True):
            self.assertEqual(network.ca_bundle(), "/path/curl.pem")

    def test_command_line_bundle_wins(self):
        network.set_ca_bundle("/path/cli.pem")
        with patch.dict(os.environ, {"CVISION_CA_BUNDLE": "/path/cvision.pem"}, clear=True):
            session = network.open_session()
        self.assertEqual(session.verify, "/path/cli.pem")
        self.assertEqual(session.headers['User-Agent'], network.USER_AGENT)


class TestFetchPage(NetworkTestCase):

    @patch.object(requests.Session, 'get', autospec=True)
    def test_job_page_verified_against_bundle(self, mock_get):
        """read_url goes through a session that verifies with the configured bundle."""
        mock_get.return_value = page(b"<p>" + b"Platform engineer wanted. " * 4 + b"</p>")
        network.set_ca_bundle("/corp/ca.pem")

        text = ingest.read_url("https://jobs.example.com/1")

        self.assertIn("Platform engineer wanted.", text)
        session, url = mock_get.call_args.args
        self.assertEqual(url, "https://jobs.example.com/1")
        self.assertEqual(session.verify, "/corp/ca.pem")
        self.assertEqual(mock_get.call_args.kwargs["timeout"], network.REQUEST_TIMEOUT)

    @patch.object(requests.Session, 'get', autospec=True)
    def test_http_error(self, mock_get):
        response = page(b"")
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Not Found")
        mock_get.return_value = response
        with self.assertLogs("cvision.network", level="ERROR"):
            self.assertIsNone(network.fetch_page("https://jobs.example.com/gone"))

    @patch.object(requests.Session, 'get', autospec=True, side_effect=requests.exceptions.SSLError("self-signed"))
    def test_tls_failure_reads_as_empty_job_description(self, mock_get):
        with self.assertLogs("cvision.network", level="ERROR"):
            self.assertEqual(ingest.read_url("https://jobs.example.com/1"), "")


class TestSdkTrustStore(NetworkTestCase):

    def test_nothing_set_without_bundle(self):
        with patch.dict(os.environ, {}, clear=True):
            with network.sdk_trust_store():
                self.assertNotIn("SSL_CERT_FILE", os.environ)

    def test_bundle_exported_for_call_only(self):
        network.set_ca_bundle("/corp/ca.pem")
        with patch.dict(os.environ, {}, clear=True):
            with network.sdk_trust_store():
                self.assertEqual(os.environ["SSL_CERT_FILE"], "/corp/ca.pem")
            self.assertNotIn("SSL_CERT_FILE", os.environ)

    def test_previous_value_restored_after_error(self):
        network.set_ca_bundle("/corp/ca.pem")
        with patch.dict(os.environ, {"SSL_CERT_FILE": "/etc/ssl/cert.pem"}, clear=True):
            with self.assertRaises(RuntimeError):
                with network.sdk_trust_store():
                    self.assertEqual(os.environ["SSL_CERT_FILE"], "/corp/ca.pem")
                    raise RuntimeError("quota exceeded")
            self.assertEqual(os.environ["SSL_CERT_FILE"], "/etc/ssl/cert.pem")


if __name__ == '__main__':
    unittest.main()
