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

from cvision.job_matcher import analyze_job_match, extract_job_keywords
from cvision.models import PersonalInfo, ResumeData, Skill

TAILOR = "Consider tailoring your resume more closely to this job description"
GOOD_MATCH = "Good keyword match! Your resume aligns well with this position"


def devops_resume():
    return ResumeData(
        personal_info=PersonalInfo(summary="Python engineer running Docker and Kubernetes with Terraform on Linux via Ansible"),
        skills=[Skill(id="1", name="Python")],
    )


class TestExtractJobKeywords(unittest.TestCase):

    def test_filters_short_tokens_and_stop_words(self):
        keywords = extract_job_keywords("We need experience with Kubernetes and Go for the team")
        self.assertEqual(keywords, ["need", "experience", "kubernetes", "team"])

    def test_lower_cases_and_deduplicates_in_order(self):
        self.assertEqual(extract_job_keywords("Python python PYTHON Docker"), ["python", "docker"])

    def test_caps_candidates(self):
        text = " ".join(f"term{i:02d}" for i in range(50))
        keywords = extract_job_keywords(text)
        self.assertEqual(len(keywords), 30)
        self.assertEqual(keywords[0], "term00")
        self.assertEqual(keywords[-1], "term29")

    def test_empty(self):
        self.assertEqual(extract_job_keywords(""), [])
        self.assertEqual(extract_job_keywords(None), [])


class TestAnalyzeJobMatch(unittest.TestCase):

    def test_empty_job_description(self):
        match = analyze_job_match(devops_resume(), "")
        self.assertEqual(match.score, 0)
        self.assertEqual(match.matched_keywords, [])
        self.assertEqual(match.missing_keywords, [])
        self.assertEqual(match.suggestions, [TAILOR])

    def test_whitespace_only_job_description(self):
        match = analyze_job_match(devops_resume(), "   \n\t ")
        self.assertEqual(match.score, 0)
        self.assertEqual(match.suggestions, [TAILOR])

    def test_no_overlap(self):
        jd = "We need experience with Kubernetes Docker and Terraform for cloud infrastructure automation"
        match = analyze_job_match(ResumeData(), jd)
        self.assertEqual(match.score, 0)
        self.assertEqual(match.matched_keywords, [])
        self.assertEqual(match.missing_keywords, [
            "need", "experience", "kubernetes", "docker", "terraform",
            "cloud", "infrastructure", "automation",
        ])
        self.assertEqual(match.suggestions, [
            TAILOR,
            "Try incorporating these keywords: need, experience, kubernetes, docker, terraform",
        ])

    def test_field_names_do_not_count_as_matches(self):
        match = analyze_job_match(ResumeData(), "experience education skills summary")
        self.assertEqual(match.matched_keywords, [])

    def test_partial_match(self):
        match = analyze_job_match(devops_resume(), "Python developer with Docker experience")
        self.assertEqual(match.matched_keywords, ["python", "docker"])
        self.assertEqual(match.missing_keywords, ["developer", "experience"])
        self.assertEqual(match.score, 50)
        self.assertEqual(match.suggestions, ["Try incorporating these keywords: developer, experience"])

    def test_score_rounds_half_up(self):
        # 1 of 8 = 12.5
        jd = "python alpha bravo charlie delta foxtrot hotel india"
        self.assertEqual(analyze_job_match(devops_resume(), jd).score, 13)

    def test_good_match(self):
        match = analyze_job_match(devops_resume(), "Python Docker Kubernetes Terraform Linux Ansible")
        self.assertEqual(match.score, 100)
        self.assertEqual(len(match.matched_keywords), 6)
        self.assertEqual(match.missing_keywords, [])
        self.assertEqual(match.suggestions, [GOOD_MATCH])

    def test_candidate_cap_limits_lists(self):
        text = " ".join(f"term{i:02d}" for i in range(50))
        match = analyze_job_match(ResumeData(), text)
        self.assertEqual(match.matched_keywords, [])
        self.assertEqual(len(match.missing_keywords), 10)
        self.assertEqual(match.score, 0)

    def test_matched_list_is_capped(self):
        skills = [f"skill{i:02d}" for i in range(15)]
        resume = ResumeData(personal_info=PersonalInfo(summary=" ".join(skills)))
        match = analyze_job_match(resume, " ".join(skills))
        self.assertEqual(match.matched_keywords, skills[:10])
        self.assertEqual(match.missing_keywords, [])
        self.assertEqual(match.score, 100)
        self.assertEqual(match.suggestions, [GOOD_MATCH])

    def test_all_suggestions_together(self):
        skills = [f"skill{i:02d}" for i in range(12)]
        gaps = [f"gap{i:02d}" for i in range(18)]
        resume = ResumeData(personal_info=PersonalInfo(summary=" ".join(skills)))
        match = analyze_job_match(resume, " ".join(skills + gaps))
        self.assertEqual(match.matched_keywords, skills[:10])
        self.assertEqual(match.missing_keywords, gaps[:10])
        # 12 of 30
        self.assertEqual(match.score, 40)
        self.assertEqual(match.suggestions, [
            TAILOR,
            "Try incorporating these keywords: gap00, gap01, gap02, gap03, gap04",
            GOOD_MATCH,
        ])

    def test_lists_are_disjoint(self):
        match = analyze_job_match(devops_resume(), "Python developer with Docker experience and Rust")
        self.assertFalse(set(match.matched_keywords) & set(match.missing_keywords))

    def test_repeatable(self):
        jd = "Python developer with Docker experience"
        resume = devops_resume()
        self.assertEqual(analyze_job_match(resume, jd), analyze_job_match(resume, jd))


if __name__ == '__main__':
    unittest.main()
