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
Structural edits applied to a resume by the editing surface (the CLI).
"""

import dataclasses
import logging
import time
from typing import List, Optional

from cvision.keywords import skill_suggestions
from cvision.models import Project, ResumeData, Skill, SkillLevel

logger = logging.getLogger(__name__)

SECTIONS = ("experiences", "education", "skills", "projects", "certifications")


def new_id() -> str:
    """Opaque timestamp-derived id. Not guaranteed unique on its own."""
    return str(int(time.time() * 1000))


def unique_id(existing: List[str]) -> str:
    candidate = new_id()
    while candidate in existing:
        candidate = str(int(candidate) + 1)
    return candidate


def _section(resume: ResumeData, section: str) -> list:
    if section not in SECTIONS:
        raise ValueError(f"Unknown resume section: {section}")
    return getattr(resume, section)


def add_entry(resume: ResumeData, section: str, entry):
    """
    Appends an entry to a section, giving it a fresh id if it has none
    or if the id is already taken within that section.
    """
    items = _section(resume, section)
    ids = [item.id for item in items]
    if not entry.id or entry.id in ids:
        entry.id = unique_id(ids)
    items.append(entry)
    return entry


def remove_entry(resume: ResumeData, section: str, entry_id: str) -> bool:
    items = _section(resume, section)
    kept = [item for item in items if item.id != entry_id]
    removed = len(kept) != len(items)
    items[:] = kept
    return removed


def update_section(resume: ResumeData, section: str, value) -> ResumeData:
    """Returns a copy of the resume with one field replaced."""
    if section not in {f.name for f in dataclasses.fields(resume)}:
        raise ValueError(f"Unknown resume section: {section}")
    return dataclasses.replace(resume, **{section: value})


def add_skill(resume: ResumeData, name: str, level: SkillLevel = SkillLevel.INTERMEDIATE,
              category: str = "Technical") -> Optional[Skill]:
    """
    Adds a skill unless the name is blank or already listed (ignoring case).
    Returns the new Skill, or None when nothing was added.
    """
    name = (name or "").strip()
    if not name or any(s.name.lower() == name.lower() for s in resume.skills):
        logger.info(f"Skill '{name}' is blank or already listed, skipping")
        return None
    return add_entry(resume, "skills", Skill(name=name, level=level, category=category))


def add_technology(project: Project, technology: str) -> bool:
    technology = (technology or "").strip()
    if not technology or technology in project.technologies:
        return False
    project.technologies.append(technology)
    return True


def suggest_skills(resume: ResumeData, industry: Optional[str] = None, limit: int = 8) -> List[str]:
    """Preset skills for the industry that the resume does not list yet."""
    industry = industry if industry is not None else resume.target_industry
    have = {s.name.lower() for s in resume.skills}
    return [s for s in skill_suggestions(industry) if s.lower() not in have][:limit]
