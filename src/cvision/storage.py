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
Local persistence: named JSON blobs, one file per key, in a data directory.

Reads never fail: a missing or unreadable blob yields the default value.
Writes that fail are logged and reported to the caller: False from the
save_* setters, None from methods that return the stored record.
"""

import contextlib
import copy
import dataclasses
import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional

from cvision import editing
from cvision.models import (
    CoverLetter,
    JobApplication,
    ResumeData,
    SavedCV,
    TemplateSettings,
    UserProfile,
)

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = "user_content/data"

STORAGE_KEY = "cvision_data"
SETTINGS_KEY = "cvision_settings"
SAVED_CVS_KEY = "cvision_saved_cvs"
COVER_LETTERS_KEY = "cvision_cover_letters"
APPLICATIONS_KEY = "cvision_applications"
PROFILE_KEY = "cvision_profile"


def _now() -> str:
    """UTC ISO-8601 timestamp with millisecond precision, e.g. 2026-01-02T03:04:05.678Z"""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def _replace(record, updates: dict, **extra):
    # Unknown field names raise TypeError, like any bad keyword argument.
    return dataclasses.replace(record, **{**updates, **extra})


def resolve_data_dir(data_dir: Optional[str] = None) -> Path:
    return Path(data_dir or os.environ.get("CVISION_DATA_DIR") or DEFAULT_DATA_DIR)


class CVisionStore:
    """
    File-backed store for the resume, its settings, saved CVs, cover letters,
    job applications and the local profile.
    """
    def __init__(self, data_dir: Optional[str] = None):
        self.data_dir = resolve_data_dir(data_dir)

    # --- raw blobs ---

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _read(self, key: str):
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading saved data from {path}: {e}")
            return None

    def _write(self, key: str, value) -> bool:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(value, f, ensure_ascii=False, indent=2)
            os.replace(tmp, path)
            logger.debug(f"Saved {key} to {path}")
            return True
        except OSError as e:
            logger.error(f"Error saving {key}: {e}")
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False

    def _remove(self, key: str):
        try:
            self._path(key).unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"Error removing {key}: {e}")

    def _read_list(self, key: str, from_dict: Callable) -> list:
        raw = self._read(key)
        if not isinstance(raw, list):
            return []
        return [from_dict(item) for item in raw if isinstance(item, dict)]

    def _write_list(self, key: str, items: list) -> bool:
        return self._write(key, [item.to_dict() for item in items])

    # --- resume & settings ---

    def load_resume(self) -> ResumeData:
        raw = self._read(STORAGE_KEY)
        return ResumeData.from_dict(raw) if isinstance(raw, dict) else ResumeData()

    def save_resume(self, resume: ResumeData) -> bool:
        return self._write(STORAGE_KEY, resume.to_dict())

    def load_settings(self) -> TemplateSettings:
        raw = self._read(SETTINGS_KEY)
        return TemplateSettings.from_dict(raw) if isinstance(raw, dict) else TemplateSettings()

    def save_settings(self, settings: TemplateSettings) -> bool:
        return self._write(SETTINGS_KEY, settings.to_dict())

    def update_section(self, section: str, value) -> Optional[ResumeData]:
        """
        Replaces one section of the stored resume and persists the result.
        Returns the updated resume, or None if it could not be saved.
        """
        resume = editing.update_section(self.load_resume(), section, value)
        return resume if self.save_resume(resume) else None

    # --- saved CVs ---

    def list_cvs(self) -> List[SavedCV]:
        return self._read_list(SAVED_CVS_KEY, SavedCV.from_dict)

    def save_cv(self, name: str, resume: Optional[ResumeData] = None,
                settings: Optional[TemplateSettings] = None) -> Optional[SavedCV]:
        """
        Snapshots a resume (the current one by default) under a name.
        Returns None when the snapshot could not be written.
        """
        cvs = self.list_cvs()
        timestamp = _now()
        cv = SavedCV(
            id=editing.unique_id([c.id for c in cvs]),
            name=name,
            resume_data=copy.deepcopy(resume if resume is not None else self.load_resume()),
            settings=copy.deepcopy(settings if settings is not None else self.load_settings()),
            created_at=timestamp,
            updated_at=timestamp,
        )
        cvs.append(cv)
        if not self._write_list(SAVED_CVS_KEY, cvs):
            return None
        logger.info(f"Saved CV '{name}' ({cv.id})")
        return cv

    def load_cv(self, cv_id: str) -> Optional[SavedCV]:
        """
        Makes a saved CV the current resume and settings.
        Returns None if there is no such CV or it could not be made current.
        """
        for cv in self.list_cvs():
            if cv.id == cv_id:
                if self.save_resume(cv.resume_data) and self.save_settings(cv.settings):
                    return cv
                return None
        logger.warning(f"No saved CV with id {cv_id}")
        return None

    def delete_cv(self, cv_id: str) -> bool:
        cvs = self.list_cvs()
        kept = [c for c in cvs if c.id != cv_id]
        if len(kept) == len(cvs):
            return False
        return self._write_list(SAVED_CVS_KEY, kept)

    # --- cover letters ---

    def list_cover_letters(self) -> List[CoverLetter]:
        return self._read_list(COVER_LETTERS_KEY, CoverLetter.from_dict)

    def save_cover_letter(self, name: str, target_company: str, target_position: str,
                          content: str) -> Optional[CoverLetter]:
        letters = self.list_cover_letters()
        timestamp = _now()
        letter = CoverLetter(
            id=editing.unique_id([letter.id for letter in letters]),
            name=name,
            target_company=target_company,
            target_position=target_position,
            content=content,
            created_at=timestamp,
            updated_at=timestamp,
        )
        letters.append(letter)
        return letter if self._write_list(COVER_LETTERS_KEY, letters) else None

    def update_cover_letter(self, letter_id: str, **updates) -> Optional[CoverLetter]:
        letters = self.list_cover_letters()
        for index, letter in enumerate(letters):
            if letter.id == letter_id:
                updates.pop("id", None)
                letters[index] = _replace(letter, updates, updated_at=_now())
                return letters[index] if self._write_list(COVER_LETTERS_KEY, letters) else None
        return None

    def delete_cover_letter(self, letter_id: str) -> bool:
        letters = self.list_cover_letters()
        kept = [letter for letter in letters if letter.id != letter_id]
        if len(kept) == len(letters):
            return False
        return self._write_list(COVER_LETTERS_KEY, kept)

    # --- applications ---

    def list_applications(self) -> List[JobApplication]:
        return self._read_list(APPLICATIONS_KEY, JobApplication.from_dict)

    def add_application(self, application: JobApplication) -> Optional[JobApplication]:
        applications = self.list_applications()
        ids = [a.id for a in applications]
        if not application.id or application.id in ids:
            application.id = editing.unique_id(ids)
        applications.append(application)
        return application if self._write_list(APPLICATIONS_KEY, applications) else None

    def update_application(self, application_id: str, **updates) -> Optional[JobApplication]:
        applications = self.list_applications()
        for index, application in enumerate(applications):
            if application.id == application_id:
                updates.pop("id", None)
                applications[index] = _replace(application, updates)
                return applications[index] if self._write_list(APPLICATIONS_KEY, applications) else None
        return None

    def delete_application(self, application_id: str) -> bool:
        applications = self.list_applications()
        kept = [a for a in applications if a.id != application_id]
        if len(kept) == len(applications):
            return False
        return self._write_list(APPLICATIONS_KEY, kept)

    # --- profile ---

    def load_profile(self) -> UserProfile:
        raw = self._read(PROFILE_KEY)
        return UserProfile.from_dict(raw) if isinstance(raw, dict) else UserProfile(created_at=_now())

    @property
    def is_logged_in(self) -> bool:
        return bool(self.load_profile().email)

    def login(self, name: str, email: str) -> Optional[UserProfile]:
        """Local sign-in: records a profile. Nothing is verified."""
        profile = UserProfile(id=editing.new_id(), name=name, email=email, created_at=_now())
        return profile if self._write(PROFILE_KEY, profile.to_dict()) else None

    def logout(self):
        self._remove(PROFILE_KEY)

    def update_profile(self, **updates) -> Optional[UserProfile]:
        profile = _replace(self.load_profile(), updates)
        return profile if self._write(PROFILE_KEY, profile.to_dict()) else None

    def clear_all(self):
        """Removes everything except the profile."""
        for key in (STORAGE_KEY, SETTINGS_KEY, SAVED_CVS_KEY, COVER_LETTERS_KEY, APPLICATIONS_KEY):
            self._remove(key)
        logger.info(f"Cleared stored data in {self.data_dir}")
