import argparse
import json
from pivotpath import cli
from pivotpath.agents.roadmap_agent import RoadmapClient


def test_sample_export(tmp_path, capsys):
    out = tmp_path / "roadmap.md"
    js = tmp_path / "roadmap.json"
    code = cli.main(["--sample", "--out", str(out), "--json", str(js)])
    assert code == 0
    assert out.read_text(encoding="utf-8").startswith("# UX Designer Roadmap")
    assert json.loads(js.read_text(encoding="utf-8"))["atsAnalysis"]["score"] == 42
    assert "[OK]" in capsys.readouterr().out


def test_generation_failure_exits_nonzero(tmp_path, monkeypatch, capsys, fake_llm):
    monkeypatch.setattr(cli, "RoadmapClient", lambda: RoadmapClient(llm=fake_llm(content="")))
    out = tmp_path / "roadmap.md"
    code = cli.main(["--target-role", "UX Designer", "--skill", "Figma", "--out", str(out)])
    assert code == 1
    assert not out.exists()
    assert "[ERR]" in capsys.readouterr().out


def test_profile_from_args(tmp_path):
    cv = tmp_path / "cv.txt"
    cv.write_text("retail manager", encoding="utf-8")
    ns = argparse.Namespace(resume=str(cv), current_role="Retail Manager", target_role="Product Manager",
                            industry="E-commerce", skill=["Negotiation", "SQL"], learning_style="Reading")
    p = cli.build_profile(ns)
    assert p.resume_text == "retail manager"
    assert p.top_skills == ["Negotiation", "SQL"]
    assert p.learning_style == "Reading"


def test_missing_resume_file(tmp_path, capsys):
    out = tmp_path / "roadmap.md"
    code = cli.main(["--resume", str(tmp_path / "nope.pdf"), "--out", str(out)])
    assert code == 1
    assert not out.exists()
    assert "[ERR] Could not read resume" in capsys.readouterr().out


def test_unsupported_resume_format(tmp_path, capsys):
    cv = tmp_path / "cv.docx"
    cv.write_bytes(b"PK")
    code = cli.main(["--resume", str(cv), "--out", str(tmp_path / "roadmap.md")])
    assert code == 1
    assert "Unsupported resume format" in capsys.readouterr().out


def test_root_script_uses_package_cli():
    import main
    assert main.main is cli.main
