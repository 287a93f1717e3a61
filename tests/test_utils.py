import base64
import pytest
from pivotpath.profile import Profile
from pivotpath.utils import attach_resume, load_resume_path, slugify


def test_pdf_becomes_attachment():
    raw = b"%PDF-1.4 binary\x00\xff"
    p = attach_resume(Profile().with_resume_text("old"), "cv.pdf", raw, "application/pdf")
    assert p.resume_text == ""
    assert p.resume_attachment.mime_type == "application/pdf"
    assert base64.b64decode(p.resume_attachment.data) == raw
    assert p.resume_file_name == "cv.pdf"


def test_image_mime_guessed_from_name():
    p = attach_resume(Profile(), "scan.png", b"\x89PNG")
    assert p.resume_attachment.mime_type == "image/png"


def test_text_file_is_decoded():
    p = attach_resume(Profile(), "cv.md", "# Jane\nDesigner".encode("utf-8"))
    assert p.resume_text == "# Jane\nDesigner"
    assert p.resume_attachment is None
    assert p.resume_file_name == "cv.md"


def test_unsupported_extension():
    with pytest.raises(ValueError):
        attach_resume(Profile(), "cv.docx", b"PK")


def test_load_from_path(tmp_path):
    f = tmp_path / "resume.txt"
    f.write_text("Ten years of retail management", encoding="utf-8")
    p = load_resume_path(Profile(), str(f))
    assert p.resume_text == "Ten years of retail management"


@pytest.mark.parametrize("value, expected", [
    ("UX Designer", "ux-designer"),
    ("Data / ML Engineer", "data-ml-engineer"),
    ("Café Manager", "cafe-manager"),
    ("", "roadmap"),
])
def test_slugify(value, expected):
    assert slugify(value) == expected
