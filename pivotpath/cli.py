from __future__ import annotations
import argparse
import logging
from pathlib import Path
from dotenv import load_dotenv
import sys
from .state import Screen, Session
from .graph.screens import Event, run_generation, transition
from .agents.roadmap_agent import RoadmapClient
from .agents.report_agent import render_json, render_markdown
from .profile import LEARNING_STYLES, Profile
from .utils import load_resume_path


def build_profile(args: argparse.Namespace) -> Profile:
    profile = Profile(
        current_role=args.current_role,
        target_role=args.target_role,
        target_industry=args.industry,
        learning_style=args.learning_style,
    )
    for skill in args.skill:
        profile = profile.with_skill(skill)
    if args.resume:
        profile = load_resume_path(profile, args.resume)
    return profile


def main(argv: list[str] | None = None) -> int:
    load_dotenv()  # load .env if exists

    parser = argparse.ArgumentParser(description="PivotPath AI: career pivot roadmap and ATS scan (Gemini)")
    parser.add_argument("--resume", help="Path to resume (.txt, .md, .pdf, .jpg, .jpeg, .png)")
    parser.add_argument("--current-role", default="", help="Current role or background")
    parser.add_argument("--target-role", default="", help="Target role, e.g. 'UX Designer'")
    parser.add_argument("--industry", default="", help="Target industry")
    parser.add_argument("--skill", action="append", default=[], help="Top skill (repeatable)")
    parser.add_argument("--learning-style", default="Mixed", choices=list(LEARNING_STYLES))
    parser.add_argument("--sample", action="store_true", help="Export the built-in sample roadmap without calling the model")
    parser.add_argument("--out", default="roadmap.md", help="Output markdown path")
    parser.add_argument("--json", dest="json_out", help="Also write the roadmap as JSON")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    session = Session()
    if args.sample:
        session = transition(session, Event.VIEW_SAMPLE)
    else:
        try:
            profile = build_profile(args)
        except (OSError, ValueError) as e:
            print(f"[ERR] Could not read resume: {e}")
            return 1
        session = transition(session, Event.START)
        session = transition(session, Event.COMPLETE, profile=profile)
        session = run_generation(session, RoadmapClient())

    if session.screen == Screen.ERROR:
        print(f"[ERR] {session.error_message}")
        return 1

    out_path = Path(args.out)
    out_path.write_text(render_markdown(session.profile, session.roadmap), encoding="utf-8")
    print(f"[OK] Roadmap written to: {out_path.resolve()}")
    if args.json_out:
        json_path = Path(args.json_out)
        json_path.write_text(render_json(session.roadmap), encoding="utf-8")
        print(f"[OK] JSON written to: {json_path.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
