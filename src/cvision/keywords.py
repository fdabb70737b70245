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
Static keyword configuration: industry keyword dictionaries, the stop-word
list used for job descriptions, and preset skill suggestions.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

DEFAULT_INDUSTRY = "general"

INDUSTRY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "software": ("agile", "scrum", "git", "api", "rest", "testing", "debugging", "deployment", "ci/cd", "documentation"),
    "marketing": ("seo", "analytics", "campaigns", "roi", "crm", "content", "social media", "brand", "strategy", "metrics"),
    "finance": ("financial analysis", "budgeting", "forecasting", "excel", "reporting", "compliance", "audit", "risk management"),
    "healthcare": ("patient care", "hipaa", "ehr", "clinical", "medical", "documentation", "protocols", "compliance"),
    "general": ("leadership", "communication", "teamwork", "problem-solving", "project management", "analytical", "organization"),
})

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "must", "can",
    "this", "that", "these", "those", "we", "you", "they", "i", "he", "she", "it",
    "as", "from", "about", "into", "through", "during", "before", "after", "above", "below",
    "up", "down", "out", "off", "over", "under", "again", "further", "then", "once",
})

# Offered by the skills editor, filtered against what the resume already has.
SKILL_SUGGESTIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "software": ("JavaScript", "TypeScript", "React", "Node.js", "Python", "Git", "AWS", "Docker", "SQL", "REST APIs", "Agile", "CI/CD"),
    "marketing": ("SEO", "Google Analytics", "Content Marketing", "Social Media", "Email Marketing", "CRM", "A/B Testing", "Copywriting", "PPC", "Brand Strategy"),
    "finance": ("Financial Analysis", "Excel", "Financial Modeling", "Budgeting", "Forecasting", "SAP", "Bloomberg", "Risk Assessment", "Accounting", "Compliance"),
    "healthcare": ("Patient Care", "EMR Systems", "HIPAA Compliance", "Medical Terminology", "Clinical Documentation", "Vital Signs", "Medication Administration"),
    "general": ("Communication", "Leadership", "Problem Solving", "Team Collaboration", "Project Management", "Time Management", "Critical Thinking", "Adaptability"),
})

SKILL_CATEGORIES = ("Technical", "Soft Skills", "Tools", "Languages", "Certifications", "Other")


def industry_keywords(industry: str) -> Tuple[str, ...]:
    """Keyword dictionary for an industry (case-insensitive), `general` if unknown."""
    return INDUSTRY_KEYWORDS.get((industry or "").lower(), INDUSTRY_KEYWORDS[DEFAULT_INDUSTRY])


def skill_suggestions(industry: str) -> Tuple[str, ...]:
    return SKILL_SUGGESTIONS.get((industry or "").lower(), SKILL_SUGGESTIONS[DEFAULT_INDUSTRY])
