from __future__ import annotations
import re
from typing import List
from ..profile import Profile
from ..schema import RoadmapResult
from ..utils import slugify


def postprocess_markdown(md: str) -> str:
    s = md.replace("\r\n", "\n").replace("\r", "\n")
    # Collapse 3+ blank lines to 2
    s = re.sub(r"\n{3,}", "\n\n", s)
    # Trim trailing spaces
    s = re.sub(r"[ \t]+\n", "\n", s)
    return s.rstrip() + "\n"


def _bullets(items: List[str]) -> List[str]:
    return [f"- {item}" for item in items] or ["- -"]


def render_markdown(profile: Profile, roadmap: RoadmapResult) -> str:
    ats = roadmap.ats_analysis
    lines: List[str] = []
    title = profile.target_role.strip() or "Career Pivot"
    lines += [f"# {title} Roadmap"]
    if profile.target_industry.strip():
        lines.append(f"_{profile.target_industry.strip()}_")
    lines += ["", "## Overview", roadmap.summary.strip() or "-"]
    lines += ["", f"**Estimated time:** {roadmap.estimated_total_time or '-'}"]
    lines += ["", "## Current Analysis", roadmap.current_analysis.strip() or "-"]
    lines += ["", "## ATS Score", f"**{ats.score}/100** ({ats.match_level} match)"]
    lines += ["", "**Missing keywords**"] + _bullets(ats.missing_keywords)
    lines += ["", "**Formatting issues**"] + _bullets(ats.formatting_issues)
    lines += ["", "**Tips**"] + _bullets(ats.tips)
    lines += ["", "## Gap Analysis"] + _bullets(roadmap.gap_analysis)
    lines += ["", "## Timeline"]
    for i, ms in enumerate(roadmap.timeline, 1):
        lines += ["", f"### {i}. {ms.title} ({ms.duration})", ms.description.strip()]
        lines += ["", "**Key actions**"] + _bullets(ms.key_actions)
        if ms.resources:
            lines += ["", "**Resources**"]
            for r in ms.resources:
                label = f"[{r.title}]({r.url})" if r.url else r.title
                extra = ", ".join(x for x in (r.provider, r.duration) if x)
                lines.append(f"- {r.type}: {label}" + (f" ({extra})" if extra else ""))
    return postprocess_markdown("\n".join(lines))


def render_json(roadmap: RoadmapResult) -> str:
    return roadmap.model_dump_json(by_alias=True, exclude_none=True, indent=2)


def export_file_name(profile: Profile, ext: str) -> str:
    return f"roadmap-{slugify(profile.target_role)}.{ext}"
