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
Reads job descriptions from plain text, DOCX, PDF files or web pages.
"""

import logging

from bs4 import BeautifulSoup
from docx import Document
from pypdf import PdfReader

from cvision.network import fetch_page

logger = logging.getLogger(__name__)


def read_text(file_path: str) -> str:
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading {file_path}: {e}")
        return ""


def read_docx(file_path: str) -> str:
    """
    Extracts paragraph text from a DOCX file.
    """
    try:
        doc = Document(file_path)
        return '\n'.join(para.text for para in doc.paragraphs)
    except Exception as e:
        logger.error(f"Error reading {file_path}: {e}")
        return ""


def read_pdf(file_path: str) -> str:
    """
    Extracts text from every page of a PDF file.
    """
    try:
        reader = PdfReader(file_path)
        return '\n'.join(page.extract_text() or "" for page in reader.pages)
    except Exception as e:
        logger.error(f"Error reading PDF {file_path}: {e}")
        return ""


def _extract_text_from_html(html) -> str:
    """Visible text of an HTML page, one phrase per line."""
    soup = BeautifulSoup(html, 'html.parser')

    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()

    lines = (line.strip() for line in soup.get_text().splitlines())
    # Break multi-headlines into a line each
    chunks = (phrase.strip() for line in lines for phrase in line.split("  "))
    return '\n'.join(chunk for chunk in chunks if chunk)


def read_url(url: str) -> str:
    """
    Fetches a job posting and returns its visible text.
    JS-rendered pages come back (nearly) empty; paste those into a file instead.
    """
    html = fetch_page(url)
    if html is None:
        return ""

    text = _extract_text_from_html(html)
    if len(text) < 50:
        logger.warning(f"Very little text found at {url}; the page may need JavaScript to render.")
    return text


def read_job_description(source: str) -> str:
    """Dispatches on the source: URL, .docx, .pdf, otherwise a UTF-8 text file."""
    if source.startswith(("http://", "https://")):
        return read_url(source)
    lowered = source.lower()
    if lowered.endswith(".docx"):
        return read_docx(source)
    if lowered.endswith(".pdf"):
        return read_pdf(source)
    return read_text(source)
