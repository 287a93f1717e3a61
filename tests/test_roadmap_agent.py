import pytest
from pivotpath.agents.roadmap_agent import GenerationError, RoadmapClient
from pivotpath.prompt import build_messages


def test_generate_returns_roadmap(fake_llm, profile, roadmap_json):
    llm = fake_llm(content=roadmap_json)
    rm = RoadmapClient(llm=llm).generate(profile)
    assert rm.summary.startswith("This roadmap bridges")
    assert len(llm.calls) == 1


def test_generate_sends_built_prompt(fake_llm, profile, roadmap_json):
    llm = fake_llm(content=roadmap_json)
    RoadmapClient(llm=llm).generate(profile)
    assert llm.calls[0] == build_messages(profile)


def test_content_blocks_reply(fake_llm, profile, roadmap_json):
    llm = fake_llm(content=[{"type": "text", "text": roadmap_json}])
    rm = RoadmapClient(llm=llm).generate(profile)
    assert rm.ats_analysis.match_level == "Low"


@pytest.mark.parametrize("content", ["", "   ", "Sorry, I can't help with that.", '{"summary": "only"}'])
def test_bad_reply_raises(fake_llm, profile, content):
    llm = fake_llm(content=content)
    with pytest.raises(GenerationError):
        RoadmapClient(llm=llm).generate(profile)
    assert len(llm.calls) == 1


def test_model_failure_is_not_retried(fake_llm, profile):
    llm = fake_llm(error=ConnectionError("quota exceeded"))
    with pytest.raises(GenerationError, match="quota exceeded"):
        RoadmapClient(llm=llm).generate(profile)
    assert len(llm.calls) == 1


def test_missing_key_becomes_generation_error(profile):
    def factory():
        raise RuntimeError("GEMINI_API_KEY (or GOOGLE_API_KEY) is missing.")

    with pytest.raises(GenerationError) as exc:
        RoadmapClient(llm_factory=factory).generate(profile)
    assert isinstance(exc.value.__cause__, RuntimeError)


def test_model_built_lazily_once(fake_llm, profile, roadmap_json):
    built = []

    def factory():
        built.append(1)
        return fake_llm(content=roadmap_json)

    client = RoadmapClient(llm_factory=factory)
    assert built == []
    client.generate(profile)
    client.generate(profile)
    assert built == [1]


def test_each_generate_calls_model(fake_llm, profile, roadmap_json):
    llm = fake_llm(content=roadmap_json)
    client = RoadmapClient(llm=llm)
    client.generate(profile)
    client.generate(profile)
    assert len(llm.calls) == 2


@pytest.mark.parametrize("content", [
    '{"a":' * 100000 + "1" + "}" * 100000,
    12345,
])
def test_malformed_reply_raises_generation_error(fake_llm, profile, content):
    llm = fake_llm(content=content)
    with pytest.raises(GenerationError):
        RoadmapClient(llm=llm).generate(profile)
    assert len(llm.calls) == 1


def test_pipeline_failure_is_wrapped(monkeypatch, fake_llm, profile, roadmap_json):
    from pivotpath.agents import roadmap_agent

    def broken_graph(llm):
        def run(state):
            raise RecursionError("maximum recursion depth exceeded")
        return run

    monkeypatch.setattr(roadmap_agent, "build_graph", broken_graph)
    with pytest.raises(GenerationError) as exc:
        RoadmapClient(llm=fake_llm(content=roadmap_json)).generate(profile)
    assert isinstance(exc.value.__cause__, RecursionError)
