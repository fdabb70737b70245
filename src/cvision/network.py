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

"""
Outbound HTTPS: job posting pages (requests) and the suggestion service
SDKs (httpx underneath).

Behind an intercepting proxy a CA bundle is needed. It is taken from
--ca-bundle, then CVISION_CA_BUNDLE, then the variables requests and curl
already honour. requests gets it per session through `verify`; the SDKs
only read SSL_CERT_FILE, so `sdk_trust_store` sets that for the duration
of a call and puts the previous value back.
"""

import contextlib
import logging
import os
from typing import Optional

import requests

logger = logging.getLogger(__name__)

CA_BUNDLE_ENV_VARS = ("CVISION_CA_BUNDLE", "REQUESTS_CA_BUNDLE", "CURL_CA_BUNDLE", "SSL_CERT_FILE")

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/123.0.0.0 Safari/537.36"
)
REQUEST_TIMEOUT = 10

_ca_bundle: Optional[str] = None


def set_ca_bundle(path: Optional[str]):
    """Bundle given on the command line; None goes back to the environment."""
    global _ca_bundle
    _ca_bundle = path
    if path:
        logger.info(f"Using CA bundle: {path}")


def ca_bundle() -> Optional[str]:
    """Path of the CA bundle in effect, or None for the default trust store."""
    if _ca_bundle:
        return _ca_bundle
    for var in CA_BUNDLE_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return value
    return None


def open_session() -> requests.Session:
    session = requests.Session()
    session.headers['User-Agent'] = USER_AGENT
    session.verify = ca_bundle() or True
    return session


def fetch_page(url: str) -> Optional[bytes]:
    """
    Body of a web page, or None if it could not be fetched.
    """
    try:
        with open_session() as session:
            response = session.get(url, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
            return response.content
    except requests.exceptions.RequestException as e:
        logger.error(f"Failed to fetch {url}: {e}")
        return None


@contextlib.contextmanager
def sdk_trust_store():
    """
    Points SSL_CERT_FILE at the CA bundle while an SDK client is in use.
    Nothing changes when the default trust store is in effect.
    """
    bundle = ca_bundle()
    previous = os.environ.get("SSL_CERT_FILE")
    if not bundle or bundle == previous:
        yield
        return

    os.environ["SSL_CERT_FILE"] = bundle
    logger.debug(f"SSL_CERT_FILE={bundle} for suggestion service call")
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop("SSL_CERT_FILE", None)
        else:
            os.environ["SSL_CERT_FILE"] = previous
