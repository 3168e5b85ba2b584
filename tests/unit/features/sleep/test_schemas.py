"""Unit tests for sleep request schemas."""

from features.sleep.schemas import (
    SleepDurationRequest,
    SleepDurationResponse,
    SleepMetricsInput,
    StressEstimateRequest,
)


def test_metrics_defaults_match_form_defaults():
    metrics = SleepMetricsInput()

    assert metrics.melatonin_level == 20
    assert metrics.heart_rate == 65
    assert metrics.bed_time == "23:00"
    assert metrics.wake_time == "06:00"
    assert metrics.age is None
    assert metrics.caffeine_afternoon == "no"
    assert metrics.sleep_hours_last_night is None


def test_metrics_accept_camel_case_and_repair_values():
    metrics = SleepMetricsInput.model_validate(
        {
            "melatoninLevel": 140,
            "heartRate": "",
            "sleepHoursLastNight": "6.5",
            "bedTime": "00:30",
            "wakeTime": "07:00",
            "age": "",
            "caffeineAfternoon": "YES",
            "unexpected": "ignored",
        }
    )

    assert metrics.melatonin_level == 100
    assert metrics.heart_rate == 65
    assert metrics.sleep_hours_last_night == 6.5
    assert metrics.bed_time == "00:30"
    assert metrics.age is None
    assert metrics.caffeine_afternoon == "yes"


def test_metrics_accept_snake_case():
    metrics = SleepMetricsInput(heart_rate=130, age=35, caffeine_afternoon="sometimes")
    assert metrics.heart_rate == 120
    assert metrics.age == 35
    assert metrics.caffeine_afternoon == "sometimes"


def test_invalid_sleep_hours_are_dropped_for_derivation():
    metrics = SleepMetricsInput.model_validate({"sleepHoursLastNight": "lots"})
    assert metrics.sleep_hours_last_night is None


def test_duration_request_and_response_use_camel_case():
    request = SleepDurationRequest.model_validate({"bedTime": "23:00", "wakeTime": None})
    assert request.bed_time == "23:00"
    assert request.wake_time is None

    assert SleepDurationResponse(sleep_hours=7.5).model_dump(by_alias=True) == {"sleepHours": 7.5}


def test_stress_request_applies_caller_defaults():
    request = StressEstimateRequest.model_validate(
        {"heartRate": None, "sleepHours": 0, "caffeineAfternoon": "maybe"}
    )
    assert request.heart_rate == 65
    assert request.sleep_hours == 7
    assert request.caffeine_afternoon == "no"


def test_zero_heart_rate_is_clamped_not_defaulted():
    assert SleepMetricsInput.model_validate({"heartRate": 0}).heart_rate == 40
    assert StressEstimateRequest.model_validate({"heartRate": 0}).heart_rate == 40
