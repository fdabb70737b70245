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
Main entry point for the CVision CLI.
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from cvision import editing
from cvision.ats_scorer import compute_ats_score
from cvision.generator import ResumeDocxExporter
from cvision.ingest import read_job_description
from cvision.job_matcher import analyze_job_match
from cvision.keywords import SKILL_CATEGORIES, industry_keywords
from cvision.llm_client import SuggestionClient
from cvision.models import (
    ApplicationStatus,
    FontSize,
    JobApplication,
    ResumeData,
    SkillLevel,
    TemplateSettings,
    TemplateType,
)
from cvision.network import set_ca_bundle
from cvision.storage import CVisionStore, resolve_data_dir

logger = logging.getLogger(__name__)

console = Console()


def setup_logging(verbosity: int, quiet: bool = False, log_dir: Path = None):
    """
    Configures logging:
    - File: <log_dir>/cvision.log (DEBUG)
    - Console: default=WARNING, -v=INFO, -vv=DEBUG, -q=ERROR
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_dir / "cvision.log")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            root.addHandler(file_handler)
        except OSError as e:
            sys.stderr.write(f"Cannot write log file in {log_dir}: {e}\n")

    if quiet:
        level = logging.ERROR
    elif verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(console_handler)

    # Silence some noisy libs if not in debug
    if verbosity < 2:
        for name in ("httpx", "httpcore", "urllib3"):
            logging.getLogger(name).setLevel(logging.WARNING)


def _print_json(data):
    console.print_json(json.dumps(data, ensure_ascii=False))


def _score_style(score: int) -> str:
    if score >= 70:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


# --- commands ---

def cmd_init(args, store: CVisionStore) -> int:
    if store.load_resume() != ResumeData() and not args.force:
        logger.error("A resume already exists. Use --force to replace it.")
        return 1
    if not (store.save_resume(ResumeData()) and store.save_settings(TemplateSettings())):
        return 1
    logger.info(f"Initialised empty resume in {store.data_dir}")
    return 0


def cmd_import(args, store: CVisionStore) -> int:
    try:
        with open(args.file, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read resume file: {e}")
        return 1
    if not isinstance(raw, dict):
        logger.error("Resume file must contain a JSON object.")
        return 1

    resume = ResumeData.from_dict(raw)
    if not store.save_resume(resume):
        return 1
    logger.info(f"Imported resume for '{resume.personal_info.full_name or 'Untitled'}'")
    return 0


def cmd_show(args, store: CVisionStore) -> int:
    _print_json(store.load_resume().to_dict())
    return 0


def cmd_settings(args, store: CVisionStore) -> int:
    settings = store.load_settings()
    updates = {
        'template': TemplateType(args.template) if args.template else None,
        'font_size': FontSize(args.font_size) if args.font_size else None,
        'font_family': args.font_family,
        'primary_color': args.primary_color,
        'accent_color': args.accent_color,
    }
    changed = False
    for name, value in updates.items():
        if value is not None:
            setattr(settings, name, value)
            changed = True
    if changed and not store.save_settings(settings):
        return 1
    _print_json(settings.to_dict())
    return 0


def cmd_score(args, store: CVisionStore) -> int:
    score = compute_ats_score(store.load_resume())
    if args.json:
        _print_json(score.to_dict())
        return 0

    table = Table(title="ATS Score", show_header=False)
    for label, value in (("Overall", score.overall), ("Formatting", score.formatting),
                         ("Keywords", score.keywords), ("Readability", score.readability)):
        table.add_row(label, f"[{_score_style(value)}]{value}[/]")
    console.print(table)
    for tip in score.suggestions:
        console.print(f"  • {tip}")
    return 0


def cmd_match(args, store: CVisionStore) -> int:
    if args.text is not None:
        jd_text = args.text
    else:
        logger.info(f"Ingesting Job Description from: {args.jd}")
        jd_text = read_job_description(args.jd)
        if not jd_text.strip():
            logger.error("Could not extract text from the job description.")
            return 1

    match = analyze_job_match(store.load_resume(), jd_text)
    if args.json:
        _print_json(match.to_dict())
        return 0

    console.print(Panel(f"[{_score_style(match.score)}]{match.score}%[/]", title="Match Score", expand=False))
    if match.matched_keywords:
        console.print(f"[green]Matched ({len(match.matched_keywords)}):[/] {', '.join(match.matched_keywords)}")
    if match.missing_keywords:
        console.print(f"[red]Missing ({len(match.missing_keywords)}):[/] {', '.join(match.missing_keywords)}")
    for tip in match.suggestions:
        console.print(f"  • {tip}")
    return 0


def cmd_keywords(args, store: CVisionStore) -> int:
    industry = args.industry if args.industry is not None else store.load_resume().target_industry
    for keyword in industry_keywords(industry):
        console.print(keyword)
    return 0


def cmd_skills(args, store: CVisionStore) -> int:
    resume = store.load_resume()
    if args.skills_command == 'add':
        skill = editing.add_skill(resume, args.name, SkillLevel(args.level), args.category)
        if skill is None:
            logger.error(f"Skill '{args.name}' is empty or already listed.")
            return 1
        return 0 if store.save_resume(resume) else 1

    if args.skills_command == 'remove':
        if not editing.remove_entry(resume, 'skills', args.id):
            logger.error(f"No skill with id {args.id}")
            return 1
        return 0 if store.save_resume(resume) else 1

    # suggest
    for name in editing.suggest_skills(resume, args.industry):
        console.print(name)
    return 0


def cmd_suggest(args, store: CVisionStore) -> int:
    resume = store.load_resume()
    role = args.role or resume.target_role
    if not role:
        logger.error("Please enter a target role (--role).")
        return 1
    industry = args.industry if args.industry is not None else (resume.target_industry or "")

    suggestions = SuggestionClient().generate_suggestions(resume, role, industry)
    if args.json:
        _print_json(suggestions.to_dict())
        return 0
    console.print(Panel(suggestions.summary, title="Suggested Professional Summary"))
    console.print("[bold]Skills to add:[/] " + ", ".join(suggestions.skills))
    console.print("[bold]Achievement phrases:[/]")
    for achievement in suggestions.achievements:
        console.print(f"  • {achievement}")
    return 0


def cmd_cover_letter(args, store: CVisionStore) -> int:
    resume = store.load_resume()
    content = SuggestionClient().generate_cover_letter(resume, args.company, args.position)
    console.print(content)
    if args.save:
        letter = store.save_cover_letter(args.save, args.company, args.position, content)
        if letter is None:
            return 1
        logger.info(f"Cover letter saved as {letter.id}")
    return 0


def cmd_export(args, store: CVisionStore) -> int:
    resume = store.load_resume()
    exporter = ResumeDocxExporter(store.load_settings())

    letter = None
    if args.cover_letter:
        letter = next((c for c in store.list_cover_letters() if c.id == args.cover_letter), None)
        if letter is None:
            logger.error(f"No cover letter with id {args.cover_letter}")
            return 1

    output = args.output if args.output.lower().endswith(".docx") else f"{args.output}.docx"
    try:
        exporter.generate(resume, output)
        if letter is not None:
            exporter.generate_cover_letter(resume, letter.content, f"{output[:-5]}_CoverLetter.docx")
    except Exception as e:
        logger.error(f"Error exporting resume: {e}")
        return 1
    return 0


def cmd_cv(args, store: CVisionStore) -> int:
    if args.cv_command == 'save':
        cv = store.save_cv(args.name)
        if cv is None:
            return 1
        console.print(cv.id)
        return 0

    if args.cv_command == 'load':
        if store.load_cv(args.id) is None:
            logger.error(f"Could not load saved CV {args.id}")
            return 1
        return 0

    if args.cv_command == 'delete':
        if not store.delete_cv(args.id):
            logger.error(f"Could not delete saved CV {args.id}")
            return 1
        return 0

    table = Table(title="Saved CVs")
    for column in ("ID", "Name", "Owner", "Experiences", "Updated"):
        table.add_column(column)
    for cv in store.list_cvs():
        table.add_row(cv.id, cv.name, cv.resume_data.personal_info.full_name or 'Untitled',
                      str(len(cv.resume_data.experiences)), cv.updated_at)
    console.print(table)
    return 0


def cmd_apps(args, store: CVisionStore) -> int:
    if args.apps_command == 'add':
        application = store.add_application(JobApplication(
            id="",
            company=args.company,
            position=args.position,
            status=ApplicationStatus(args.status),
            applied_date=args.date or date.today().isoformat(),
            notes=args.notes,
            cv_id=args.cv_id,
            cover_letter_id=args.cover_letter_id,
        ))
        if application is None:
            return 1
        console.print(application.id)
        return 0

    if args.apps_command == 'status':
        if store.update_application(args.id, status=ApplicationStatus(args.status)) is None:
            logger.error(f"Could not update application {args.id}")
            return 1
        return 0

    if args.apps_command == 'delete':
        if not store.delete_application(args.id):
            logger.error(f"Could not delete application {args.id}")
            return 1
        return 0

    applications = store.list_applications()
    active = sum(1 for a in applications if a.status in (ApplicationStatus.INTERVIEWING, ApplicationStatus.OFFERED))
    table = Table(title=f"Applications ({len(applications)}, {active} active)")
    for column in ("ID", "Company", "Position", "Status", "Applied"):
        table.add_column(column)
    for a in applications:
        table.add_row(a.id, a.company, a.position, a.status.value, a.applied_date)
    console.print(table)
    return 0


COMMANDS = {
    'init': cmd_init,
    'import': cmd_import,
    'show': cmd_show,
    'settings': cmd_settings,
    'score': cmd_score,
    'match': cmd_match,
    'keywords': cmd_keywords,
    'skills': cmd_skills,
    'suggest': cmd_suggest,
    'cover-letter': cmd_cover_letter,
    'export': cmd_export,
    'cv': cmd_cv,
    'apps': cmd_apps,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cvision", description="Resume builder with ATS scoring and job matching")
    parser.add_argument("--data-dir", help="Directory for stored data (default: $CVISION_DATA_DIR or user_content/data)")
    parser.add_argument("--ca-bundle", help="Path to a custom CA certificate bundle for HTTPS verification (proxy environments)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase output verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only show errors")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("init", help="Start an empty resume with default settings")
    p.add_argument("--force", action="store_true", help="Replace an existing resume")

    p = sub.add_parser("import", help="Load a resume JSON document as the current resume")
    p.add_argument("file")

    sub.add_parser("show", help="Print the current resume as JSON")

    p = sub.add_parser("settings", help="Show or change template settings")
    p.add_argument("--template", choices=[t.value for t in TemplateType])
    p.add_argument("--font-size", choices=[s.value for s in FontSize])
    p.add_argument("--font-family")
    p.add_argument("--primary-color")
    p.add_argument("--accent-color")

    p = sub.add_parser("score", help="ATS compatibility score of the current resume")
    p.add_argument("--json", action="store_true")

    p = sub.add_parser("match", help="Match the current resume against a job description")
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument("--jd", help="URL or file path (.txt, .docx, .pdf) of the job description")
    source.add_argument("--text", help="Job description text")
    p.add_argument("--json", action="store_true")

    p = sub.add_parser("keywords", help="Print an industry keyword dictionary")
    p.add_argument("industry", nargs="?")

    p = sub.add_parser("skills", help="Add, remove or suggest skills")
    skills = p.add_subparsers(dest="skills_command", required=True)
    s = skills.add_parser("add")
    s.add_argument("name")
    s.add_argument("--level", choices=[level.value for level in SkillLevel], default=SkillLevel.INTERMEDIATE.value)
    s.add_argument("--category", default=SKILL_CATEGORIES[0])
    s = skills.add_parser("remove")
    s.add_argument("id")
    s = skills.add_parser("suggest")
    s.add_argument("--industry")

    p = sub.add_parser("suggest", help="AI content suggestions for a target role")
    p.add_argument("--role")
    p.add_argument("--industry")
    p.add_argument("--json", action="store_true")

    p = sub.add_parser("cover-letter", help="Draft a cover letter")
    p.add_argument("--company", required=True)
    p.add_argument("--position", required=True)
    p.add_argument("--save", metavar="NAME", help="Store the letter under this name")

    p = sub.add_parser("export", help="Export the current resume to DOCX")
    p.add_argument("output", help="Output filename")
    p.add_argument("--cover-letter", metavar="ID", help="Also export a stored cover letter")

    p = sub.add_parser("cv", help="Manage saved CVs")
    cv = p.add_subparsers(dest="cv_command", required=True)
    c = cv.add_parser("save")
    c.add_argument("name")
    cv.add_parser("list")
    for action in ("load", "delete"):
        c = cv.add_parser(action)
        c.add_argument("id")

    p = sub.add_parser("apps", help="Track job applications")
    apps = p.add_subparsers(dest="apps_command", required=True)
    a = apps.add_parser("add")
    a.add_argument("company")
    a.add_argument("position")
    a.add_argument("--status", choices=[s.value for s in ApplicationStatus], default=ApplicationStatus.APPLIED.value)
    a.add_argument("--date", help="Applied date (default: today)")
    a.add_argument("--notes")
    a.add_argument("--cv-id")
    a.add_argument("--cover-letter-id")
    apps.add_parser("list")
    a = apps.add_parser("status")
    a.add_argument("id")
    a.add_argument("status", choices=[s.value for s in ApplicationStatus])
    a = apps.add_parser("delete")
    a.add_argument("id")

    return parser


def main(argv=None):
    try:
        sys.exit(_main_cli(argv))
    except KeyboardInterrupt:
        sys.stderr.write("\n\033[31m[-] Cancelled by user\033[0m\n")
        sys.exit(130)


def _main_cli(argv=None) -> int:
    """
    Parses arguments, configures logging and runs one command.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    data_dir = resolve_data_dir(args.data_dir)
    setup_logging(args.verbose, quiet=args.quiet, log_dir=data_dir / "logs")

    if args.ca_bundle:
        set_ca_bundle(args.ca_bundle)

    store = CVisionStore(str(data_dir))
    logger.debug(f"Running '{args.command}' with data in {data_dir}")
    return COMMANDS[args.command](args, store)


if __name__ == "__main__":
    main()
