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
from unittest.mock import patch

from cvision import editing
from cvision.models import Experience, PersonalInfo, Project, ResumeData, Skill, SkillLevel


class TestIds(unittest.TestCase):

    @patch('cvision.editing.time.time', return_value=1700000000.5)
    def test_new_id_is_millisecond_timestamp(self, mock_time):
        self.assertEqual(editing.new_id(), "1700000000500")

    @patch('cvision.editing.time.time', return_value=1700000000.5)
    def test_unique_id_skips_taken_ids(self, mock_time):
        self.assertEqual(editing.unique_id(["1700000000500", "1700000000501"]), "1700000000502")


class TestEntries(unittest.TestCase):

    def test_add_entry_assigns_id(self):
        resume = ResumeData()
        entry = editing.add_entry(resume, "experiences", Experience(company="Acme"))
        self.assertTrue(entry.id)
        self.assertEqual(resume.experiences, [entry])

    def test_add_entry_replaces_duplicate_id(self):
        resume = ResumeData(experiences=[Experience(id="1")])
        entry = editing.add_entry(resume, "experiences", Experience(id="1"))
        self.assertNotEqual(entry.id, "1")
        self.assertEqual(len({e.id for e in resume.experiences}), 2)

    def test_add_entry_appends_in_order(self):
        resume = ResumeData()
        editing.add_entry(resume, "experiences", Experience(id="a", company="First"))
        editing.add_entry(resume, "experiences", Experience(id="b", company="Second"))
        self.assertEqual([e.company for e in resume.experiences], ["First", "Second"])

    def test_unknown_section(self):
        with self.assertRaises(ValueError):
            editing.add_entry(ResumeData(), "hobbies", Experience())

    def test_remove_entry(self):
        resume = ResumeData(experiences=[Experience(id="1"), Experience(id="2")])
        self.assertTrue(editing.remove_entry(resume, "experiences", "1"))
        self.assertEqual([e.id for e in resume.experiences], ["2"])
        self.assertFalse(editing.remove_entry(resume, "experiences", "missing"))

    def test_update_section_returns_copy(self):
        resume = ResumeData()
        info = PersonalInfo(full_name="Jane")
        updated = editing.update_section(resume, "personal_info", info)
        self.assertEqual(updated.personal_info.full_name, "Jane")
        self.assertEqual(resume.personal_info.full_name, "")

    def test_update_unknown_section(self):
        with self.assertRaises(ValueError):
            editing.update_section(ResumeData(), "hobbies", [])


class TestSkills(unittest.TestCase):

    def test_add_skill(self):
        resume = ResumeData()
        skill = editing.add_skill(resume, "  Python ", SkillLevel.EXPERT)
        self.assertEqual(skill.name, "Python")
        self.assertEqual(skill.level, SkillLevel.EXPERT)
        self.assertEqual(skill.category, "Technical")
        self.assertEqual(len(resume.skills), 1)

    def test_duplicate_skill_ignores_case(self):
        resume = ResumeData(skills=[Skill(id="1", name="Python")])
        self.assertIsNone(editing.add_skill(resume, "python"))
        self.assertEqual(len(resume.skills), 1)

    def test_blank_skill(self):
        resume = ResumeData()
        self.assertIsNone(editing.add_skill(resume, "   "))
        self.assertEqual(resume.skills, [])

    def test_suggest_skills_excludes_existing(self):
        resume = ResumeData(skills=[Skill(name="javascript")], target_industry="software")
        suggestions = editing.suggest_skills(resume)
        self.assertNotIn("JavaScript", suggestions)
        self.assertEqual(suggestions[0], "TypeScript")
        self.assertEqual(len(suggestions), 8)

    def test_suggest_skills_unknown_industry(self):
        suggestions = editing.suggest_skills(ResumeData(), industry="Aerospace", limit=3)
        self.assertEqual(suggestions, ["Communication", "Leadership", "Problem Solving"])


class TestTechnologies(unittest.TestCase):

    def test_add_technology(self):
        project = Project(name="cvision")
        self.assertTrue(editing.add_technology(project, " Python "))
        self.assertFalse(editing.add_technology(project, "Python"))
        self.assertFalse(editing.add_technology(project, ""))
        self.assertEqual(project.technologies, ["Python"])


if __name__ == '__main__':
    unittest.main()
