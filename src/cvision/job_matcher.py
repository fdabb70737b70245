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
Matches a resume against the vocabulary of a job description.
"""

import logging
from typing import List

from cvision.ats_scorer import round_half_up
from cvision.keywords import STOP_WORDS
from cvision.models import JobMatch, ResumeData
from cvision.serialization import resume_search_text

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 30
MAX_LISTED = 10
MIN_KEYWORD_LENGTH = 4
SUGGESTED_MISSING = 5
GOOD_MATCH_COUNT = 5


def extract_job_keywords(job_description: str) -> List[str]:
    """
    Candidate keywords in order of first appearance: lower-cased
    whitespace-separated tokens, longer than three characters, not stop
    words, at most MAX_CANDIDATES of them.
    """
    tokens = dict.fromkeys((job_description or "").lower().split())
    candidates = [t for t in tokens if len(t) >= MIN_KEYWORD_LENGTH and t not in STOP_WORDS]
    return candidates[:MAX_CANDIDATES]


def analyze_job_match(resume: ResumeData, job_description: str) -> JobMatch:
    """
    Scores how much of a job description's vocabulary the resume covers.

    Args:
        resume (ResumeData): The resume to check.
        job_description (str): Free text; may be empty.

    Returns:
        JobMatch: score in [0, 100], up to ten matched and ten missing
        keywords, and suggestions.
    """
    text = resume_search_text(resume)
    candidates = extract_job_keywords(job_description)

    matched = [k for k in candidates if k in text]
    missing = [k for k in candidates if k not in text]

    score = round_half_up(len(matched) / len(candidates) * 100) if candidates else 0
    logger.debug(f"Job match: {len(matched)}/{len(candidates)} keywords, score {score}")

    suggestions = []
    if score < 50:
        suggestions.append("Consider tailoring your resume more closely to this job description")
    if missing:
        suggestions.append(f"Try incorporating these keywords: {', '.join(missing[:SUGGESTED_MISSING])}")
    if len(matched) > GOOD_MATCH_COUNT:
        suggestions.append("Good keyword match! Your resume aligns well with this position")

    return JobMatch(
        score=score,
        matched_keywords=matched[:MAX_LISTED],
        missing_keywords=missing[:MAX_LISTED],
        suggestions=suggestions,
    )
