import json

from resume_coach.services.prompts import build_chat_prompt, build_prompt


def test_analyze_prompt_embeds_resume_and_schema():
    prompt = build_prompt("analyze", "Jane Doe\nPython developer")

    assert 'Resume:\n"""\nJane Doe\nPython developer\n"""' in prompt
    assert '"overallScore": number (0-100' in prompt
    assert '"keywordDensity": { [keyword: string]: number }' in prompt
    assert "Return ONLY the JSON object, no markdown or explanation." in prompt
    assert "empty array, 0, or empty string" in prompt


def test_build_prompt_has_builder_guidance():
    prompt = build_prompt("build", "I am a nurse with 5 years experience")

    assert 'User Details:\n"""\nI am a nurse with 5 years experience\n"""' in prompt
    assert '"atsScore": number' in prompt
    assert "[ADD YOUR EXPERIENCE HERE]" in prompt
    assert '"Frontend", "Backend", "Cloud/DevOps", "Tools", "Testing"' in prompt
    assert prompt.rstrip().endswith("Return ONLY the JSON object, no markdown or explanation.")


def test_unknown_mode_uses_analysis_template():
    assert build_prompt("whatever", "text") == build_prompt("analyze", "text")


def test_prompt_is_deterministic_and_keeps_braces():
    text = 'Skills: {Go}, "quoted" and """ delimiter'
    assert build_prompt("analyze", text) == build_prompt("analyze", text)
    assert text in build_prompt("analyze", text)


def test_chat_prompt_without_analysis():
    prompt = build_chat_prompt("How do I improve?")

    assert "resume analysis" not in prompt
    assert "You are an AI Career Coach." in prompt
    assert 'User: "How do I improve?"' in prompt


def test_chat_prompt_embeds_compact_analysis():
    analysis = {"overallScore": 70, "strengths": ["Go"]}
    prompt = build_chat_prompt("Hi", analysis)

    expected = "Here is the user's resume analysis: " + json.dumps(analysis, separators=(",", ":"))
    assert prompt.startswith("\n" + expected + "\n")
