from __future__ import annotations
import base64
import mimetypes
import re
import unicodedata
from pathlib import Path
from typing import Optional
from .profile import Profile

ACCEPTED_EXTENSIONS = ["txt", "md", "pdf", "jpg", "jpeg", "png"]


def is_binary_type(mime_type: str) -> bool:
    return "pdf" in mime_type or "image" in mime_type


def guess_mime_type(file_name: str) -> str:
    suffix = Path(file_name).suffix.lower()
    if suffix == ".md":
        return "text/markdown"
    return mimetypes.guess_type(file_name)[0] or "text/plain"


def attach_resume(profile: Profile, file_name: str, content: bytes, mime_type: Optional[str] = None) -> Profile:
    """Put an uploaded resume on the profile.

    PDFs and images travel to the model as base64 attachments; anything else
    is decoded as text. Either way the previous resume is replaced.
    """
    suffix = Path(file_name).suffix.lower().lstrip(".")
    if suffix not in ACCEPTED_EXTENSIONS:
        raise ValueError(f"Unsupported resume format '.{suffix}'. Use one of: {', '.join(ACCEPTED_EXTENSIONS)}")
    mime_type = mime_type or guess_mime_type(file_name)
    if is_binary_type(mime_type):
        data = base64.b64encode(content).decode("ascii")
        return profile.with_attachment(mime_type, data, file_name=file_name)
    text = content.decode("utf-8", errors="replace")
    return profile.with_resume_text(text, file_name=file_name)


def load_resume_path(profile: Profile, path: str) -> Profile:
    p = Path(path)
    return attach_resume(profile, p.name, p.read_bytes())


def slugify(value: str) -> str:
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^a-zA-Z0-9-]+", "-", value).strip("-")
    value = re.sub(r"-+", "-", value)
    return value.lower() or "roadmap"
