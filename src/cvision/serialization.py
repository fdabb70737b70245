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
Flattens a resume into the lower-cased text that keyword checks search.
Both the ATS scorer and the job matcher go through `resume_search_text`.
"""

from typing import Iterator

from cvision.models import ResumeData


def _string_values(node) -> Iterator[str]:
    # Values only; field names are not searchable text.
    if isinstance(node, str):
        yield node
    elif isinstance(node, dict):
        for value in node.values():
            yield from _string_values(value)
    elif isinstance(node, list):
        for value in node:
            yield from _string_values(value)


def resume_search_text(resume: ResumeData) -> str:
    """
    Every string in the resume, in field order, one per line, lower-cased.
    Deterministic for a given resume.
    """
    return "\n".join(_string_values(resume.to_dict())).lower()
