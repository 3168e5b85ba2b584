"""Unit tests for prompt construction."""

import json

from features.sleep.prompts import RESPONSE_TEMPLATE, SYSTEM_PROMPT, build_analysis_prompt
from features.sleep.schemas import SleepMetricsInput


def test_prompt_embeds_metrics():
    metrics = SleepMetricsInput(
        melatonin_level=35, heart_rate=82, bed_time="00:15", wake_time="06:45", age=29,
        caffeine_afternoon="sometimes",
    )

    prompt = build_analysis_prompt(metrics, 6.5)

    assert "35 pg/mL" in prompt
    assert "82 bpm" in prompt
    assert "6.5 hours" in prompt
    assert "bed: 00:15, wake: 06:45" in prompt
    assert "Age: 29" in prompt
    assert "Caffeine after 2pm: sometimes" in prompt


def test_prompt_marks_missing_age():
    prompt = build_analysis_prompt(SleepMetricsInput(), 7.0)
    assert "Age: not provided" in prompt
    assert "7 hours" in prompt


def test_prompt_lists_every_result_key():
    prompt = build_analysis_prompt(SleepMetricsInput(), 7.0)
    template = json.loads(prompt[prompt.index("{"):])
    assert set(template) == set(RESPONSE_TEMPLATE)
    assert "stressLevelDetected" in template


def test_system_prompt_requests_bare_json():
    assert "JSON" in SYSTEM_PROMPT
