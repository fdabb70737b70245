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
Client for AI content suggestions and cover letters.
Supports Google AI Studio (Gemini) and OpenAI. Every request has a
deterministic local fallback, used whenever the remote call is unavailable
or fails (missing key, rate limit, quota, network, unparseable reply).
"""

import os
import re
import json
import logging
from typing import Optional

from cvision.models import ContentSuggestions, ResumeData
from cvision.network import sdk_trust_store

logger = logging.getLogger(__name__)

GEMINI_MODELS = ['gemini-2.5-flash', 'gemini-2.0-flash', 'gemini-1.5-flash']
OPENAI_MODEL = 'gpt-4o-mini'

SUGGESTIONS_SYSTEM_PROMPT = (
    "You are an expert career coach and resume writer. Generate tailored suggestions to improve "
    "a resume based on the target role and industry. Be specific, actionable, and professional. "
    "Return JSON only."
)

COVER_LETTER_SYSTEM_PROMPT = (
    "You are an expert cover letter writer. Create professional, personalized cover letters that "
    "highlight relevant experience and show genuine interest in the company."
)


def fallback_suggestions(target_role: str, target_industry: str = "") -> ContentSuggestions:
    """Template suggestions used when the service cannot be reached."""
    return ContentSuggestions(
        summary=(
            f"Results-driven {target_role} with expertise in {target_industry or 'the industry'}. "
            "Proven track record of delivering high-quality solutions and driving business outcomes. "
            "Passionate about innovation and continuous improvement."
        ),
        skills=[
            'Strategic Planning',
            'Team Leadership',
            'Problem Solving',
            'Communication',
            'Project Management',
        ],
        achievements=[
            'Increased team productivity by 25% through implementation of new processes',
            'Led cross-functional team of 10+ members to deliver project ahead of schedule',
            'Reduced operational costs by 15% through process optimization',
        ],
    )


def fallback_cover_letter(resume: ResumeData, target_company: str, target_position: str) -> str:
    """Template cover letter built from the resume alone."""
    info = resume.personal_info
    latest = resume.experiences[0] if resume.experiences else None
    skills = ', '.join(s.name for s in resume.skills[:3])
    first_achievement = latest.achievements[0] if latest and latest.achievements else ''

    return f"""Dear Hiring Manager,

I am writing to express my strong interest in the {target_position} position at {target_company}. With my background in {resume.target_industry or 'the industry'} and experience as {(latest.position if latest else '') or 'a professional'}, I am confident in my ability to contribute effectively to your team.

{info.summary or 'I bring a combination of technical expertise and soft skills that would make me a valuable addition to your organization.'}

Throughout my career, I have developed strong skills in {skills or 'various relevant areas'}. My experience at {(latest.company if latest else '') or 'previous organizations'} has equipped me with the ability to {first_achievement or 'deliver results and exceed expectations'}.

I am particularly excited about the opportunity at {target_company} because of your commitment to excellence and innovation. I believe my skills and experience align well with the requirements of this role, and I am eager to bring my expertise to your team.

Thank you for considering my application. I look forward to the opportunity to discuss how I can contribute to {target_company}'s continued success.

Sincerely,
{info.full_name or '[Your Name]'}"""


class SuggestionClient:
    """
    Abstraction layer for LLM providers.
    Builds prompts from resume data and maps replies back to models.
    """
    def __init__(self, provider: str = "gemini"):
        self.provider = provider
        if provider == "openai":
            self.api_key = os.environ.get("OPENAI_API_KEY")
        else:
            self.api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("OPENAI_API_KEY")
        if not self.api_key:
            logger.warning("No API key found. Suggestions will use local templates.")

    def _call_llm(self, system_prompt: str, prompt: str) -> Optional[str]:
        """
        Mockable wrapper for LLM calls.
        Returns the reply text, or None when no provider could answer.
        """
        if not self.api_key:
            return None

        try:
            with sdk_trust_store():
                return self._call_provider(system_prompt, prompt)
        except ImportError as e:
            logger.error(f"Missing dependency for provider: {e}")
            return None
        except Exception as e:
            logger.warning(f"Suggestion service call failed: {e}")
            return None

    def _call_provider(self, system_prompt: str, prompt: str) -> Optional[str]:
        if self.provider == "openai" or self.api_key.startswith("sk-"):
            import openai
            client = openai.OpenAI(api_key=self.api_key)
            response = client.chat.completions.create(
                model=OPENAI_MODEL,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt},
                ],
                temperature=0.7,
            )
            return response.choices[0].message.content

        from google import genai

        client = genai.Client(api_key=self.api_key)
        for model_name in GEMINI_MODELS:
            try:
                logger.info(f"Attempting model: {model_name}")
                response = client.models.generate_content(
                    model=model_name,
                    contents=f"{system_prompt}\n\n{prompt}",
                )
                return response.text
            except Exception as e:
                logger.warning(f"Model {model_name} failed: {e}")
        return None

    def generate_suggestions(self, resume: ResumeData, target_role: str,
                             target_industry: str = "") -> ContentSuggestions:
        """
        Asks for a tailored summary, five skills and three achievement bullets.
        """
        experience = '; '.join(f"{e.position} at {e.company}" for e in resume.experiences)
        prompt = f"""Based on this resume data and target role, provide suggestions:

Resume Summary: {resume.personal_info.summary or 'None provided'}
Current Skills: {', '.join(s.name for s in resume.skills) or 'None'}
Experience: {experience or 'None'}

Target Role: {target_role}
Target Industry: {target_industry or 'General'}

Return a JSON object with:
- summary: A compelling 2-3 sentence professional summary tailored to the target role
- skills: Array of 5 relevant skills to add (that aren't already listed)
- achievements: Array of 3 achievement bullet points with metrics"""

        reply = self._call_llm(SUGGESTIONS_SYSTEM_PROMPT, prompt)
        if reply:
            data = self._extract_json(reply)
            if isinstance(data, dict):
                return ContentSuggestions.from_dict(data)
            logger.error("Failed to decode suggestion response")

        logger.info("Using template suggestions")
        return fallback_suggestions(target_role, target_industry)

    def generate_cover_letter(self, resume: ResumeData, target_company: str, target_position: str) -> str:
        """
        Writes a 3-4 paragraph cover letter for a company and position.
        """
        info = resume.personal_info
        prompt = f"""Write a professional cover letter for:

Applicant Name: {info.full_name or 'the applicant'}
Current Role: {(resume.experiences[0].position if resume.experiences else '') or 'Professional'}
Key Skills: {', '.join(s.name for s in resume.skills[:5]) or 'Various professional skills'}
Summary: {info.summary or ''}

Target Company: {target_company}
Target Position: {target_position}

Write a compelling cover letter (3-4 paragraphs) that:
1. Opens with enthusiasm for the specific role
2. Highlights relevant experience and achievements
3. Shows knowledge/interest in the company
4. Closes with a call to action

Return only the cover letter text, properly formatted with paragraphs."""

        reply = self._call_llm(COVER_LETTER_SYSTEM_PROMPT, prompt)
        if reply and reply.strip():
            return reply.strip()

        logger.info("Using template cover letter")
        return fallback_cover_letter(resume, target_company, target_position)

    def _extract_json(self, text: str):
        """First JSON object in a reply, ignoring code fences and chatter."""
        match = re.search(r"\{[\s\S]*\}", text)
        if not match:
            return None
        try:
            return json.loads(match.group(0))
        except json.JSONDecodeError:
            return None
