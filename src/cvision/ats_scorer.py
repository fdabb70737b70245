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
Heuristic ATS (Applicant Tracking System) compatibility scoring.

Three sub-scores are computed independently:
  - formatting: contact details, summary, experience and skill counts
  - keywords: coverage of the target industry's keyword dictionary
  - readability: description, achievement and summary lengths

Each starts at its ceiling and is penalised. The overall score is the
unweighted mean of the three. Scoring is a pure function of the resume.
"""

import logging
import math
from typing import List, Tuple

from cvision.keywords import DEFAULT_INDUSTRY, industry_keywords
from cvision.models import ATSScore, ResumeData
from cvision.serialization import resume_search_text

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5
MIN_SUMMARY_LENGTH = 50
MAX_SUMMARY_LENGTH = 300
MAX_DESCRIPTION_LENGTH = 500
MIN_SKILLS = 5
KEYWORD_THRESHOLD = 50


def round_half_up(value: float) -> int:
    """Rounds .5 away from zero for positives, as a displayed percentage would."""
    return int(math.floor(value + 0.5))


def _formatting_score(resume: ResumeData) -> Tuple[int, List[str]]:
    info = resume.personal_info
    score = 100
    suggestions = []

    if not info.email:
        score -= 20
        suggestions.append("Add an email address to your contact information")
    if not info.phone:
        score -= 15
        suggestions.append("Include a phone number for easy contact")
    if len(info.summary or "") < MIN_SUMMARY_LENGTH:
        score -= 15
        suggestions.append(f"Write a professional summary of at least {MIN_SUMMARY_LENGTH} characters")
    if not resume.experiences:
        score -= 25
        suggestions.append("Add work experience to strengthen your resume")
    if len(resume.skills) < MIN_SKILLS:
        score -= 10
        suggestions.append(f"Add more skills (aim for at least {MIN_SKILLS} relevant skills)")

    return score, suggestions


def _keywords_score(resume: ResumeData) -> Tuple[float, List[str]]:
    industry = (resume.target_industry or "").lower() or DEFAULT_INDUSTRY
    keywords = industry_keywords(industry)
    text = resume_search_text(resume)

    matched = sum(1 for keyword in keywords if keyword.lower() in text)
    score = min(100.0, matched / len(keywords) * 100)
    logger.debug(f"Keyword coverage for '{industry}': {matched}/{len(keywords)}")

    suggestions = []
    if score < KEYWORD_THRESHOLD:
        suggestions.append(f"Consider adding more industry-specific keywords related to {industry}")
    return score, suggestions


def _readability_score(resume: ResumeData) -> Tuple[int, List[str]]:
    score = 100
    suggestions = []

    for index, exp in enumerate(resume.experiences, start=1):
        if len(exp.description or "") > MAX_DESCRIPTION_LENGTH:
            score -= 10
            suggestions.append(f"Experience {index}: Consider making the description more concise")
        if not exp.achievements:
            score -= 5
            suggestions.append(f"Experience {index}: Add quantifiable achievements")

    if len(resume.personal_info.summary or "") > MAX_SUMMARY_LENGTH:
        score -= 10
        suggestions.append("Consider shortening your professional summary")

    return score, suggestions


def compute_ats_score(resume: ResumeData) -> ATSScore:
    """
    Scores a resume for ATS compatibility.

    Args:
        resume (ResumeData): Any resume, including a completely empty one.

    Returns:
        ATSScore: Integer scores in [0, 100] and at most five suggestions,
        ordered formatting, keywords, readability.
    """
    formatting, formatting_tips = _formatting_score(resume)
    keywords, keyword_tips = _keywords_score(resume)
    readability, readability_tips = _readability_score(resume)

    # Penalties fire on the raw values; only the reported scores are floored.
    formatting = max(0, formatting)
    keywords = max(0.0, keywords)
    readability = max(0, readability)

    overall = round_half_up((formatting + keywords + readability) / 3)
    suggestions = formatting_tips + keyword_tips + readability_tips

    return ATSScore(
        overall=overall,
        formatting=formatting,
        keywords=round_half_up(keywords),
        readability=readability,
        suggestions=suggestions[:MAX_SUGGESTIONS],
    )
