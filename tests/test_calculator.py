"""Tests for the calculator factory and the report reader."""

from datetime import timedelta

import pytest
from structlog.testing import capture_logs

from fitness_tracker.core.config import settings
from fitness_tracker.services.calories import (
    MissingParameterError,
    Running,
    Swimming,
    UnknownActivityError,
    Walking,
    build_calculator,
    read_data,
    supported_activities,
)

SWIMMING_REPORT = (
    "Activity type: Swimming\n"
    "Duration: 90 min\n"
    "Distance: 2.76 km.\n"
    "Avg. speed: 1.33 km/h\n"
    "Calories burned: 620.50\n"
)

WALKING_REPORT = (
    "Activity type: Walking\n"
    "Duration: 225 min\n"
    "Distance: 13.00 km.\n"
    "Avg. speed: 3.47 km/h\n"
    "Calories burned: 947.82\n"
)

RUNNING_REPORT = (
    "Activity type: Running\n"
    "Duration: 30 min\n"
    "Distance: 3.25 km.\n"
    "Avg. speed: 6.50 km/h\n"
    "Calories burned: 302.91\n"
)


class TestReadData:
    def test_swimming(self, swimming: Swimming) -> None:
        assert read_data(swimming, "en") == SWIMMING_REPORT

    def test_walking(self, walking: Walking) -> None:
        assert read_data(walking, "en") == WALKING_REPORT

    def test_running(self, running: Running) -> None:
        assert read_data(running, "en") == RUNNING_REPORT

    def test_russian_labels(self, running: Running) -> None:
        expected = (
            "Тип тренировки: Running\n"
            "Длительность: 30 мин\n"
            "Дистанция: 3.25 км.\n"
            "Ср. скорость: 6.50 км/ч\n"
            "Потрачено ккал: 302.91\n"
        )
        assert read_data(running, "ru") == expected

    def test_default_locale_from_settings(self, running: Running, monkeypatch) -> None:
        monkeypatch.setattr(settings, "REPORT_LOCALE", "ru")
        assert read_data(running).startswith("Тип тренировки: Running\n")

    def test_zero_duration_still_reports(self) -> None:
        training = build_calculator(
            "running",
            training_type="Running",
            action=5000,
            duration=timedelta(0),
            weight=85,
        )

        with capture_logs() as logs:
            text = read_data(training, "en")

        assert text == (
            "Activity type: Running\n"
            "Duration: 0 min\n"
            "Distance: 3.25 km.\n"
            "Avg. speed: 0.00 km/h\n"
            "Calories burned: 0.00\n"
        )
        # One notice from mean speed, one from the calorie guard
        notices = [entry for entry in logs if entry["event"] == "Division by zero"]
        assert len(notices) == 2

    def test_notices_stay_off_stdout(self, capsys) -> None:
        training = build_calculator(
            "running",
            training_type="Running",
            action=5000,
            duration=timedelta(0),
            weight=85,
        )

        print(read_data(training, "en"), end="")

        captured = capsys.readouterr()
        assert captured.out == (
            "Activity type: Running\n"
            "Duration: 0 min\n"
            "Distance: 3.25 km.\n"
            "Avg. speed: 0.00 km/h\n"
            "Calories burned: 0.00\n"
        )
        assert "Division by zero" in captured.err


class TestBuildCalculator:
    def test_supported_activities(self) -> None:
        assert supported_activities() == ["running", "walking", "swimming"]

    def test_running_uses_default_step(self) -> None:
        calculator = build_calculator(
            "running",
            training_type="Running",
            action=5000,
            duration=timedelta(minutes=30),
            weight=85,
        )

        assert isinstance(calculator, Running)
        assert calculator.training.len_step == 0.65

    def test_swimming_uses_stroke_length(self) -> None:
        calculator = build_calculator(
            "Swimming",
            training_type="Swimming",
            action=2000,
            duration=timedelta(minutes=90),
            weight=85,
            length_pool=50,
            count_pool=40,
        )

        assert isinstance(calculator, Swimming)
        assert calculator.training.len_step == 1.38
        assert calculator.distance() == pytest.approx(2.76)

    def test_explicit_step_length(self) -> None:
        calculator = build_calculator(
            "walking",
            training_type="Walking",
            action=1000,
            duration=timedelta(minutes=10),
            weight=70,
            len_step=0.8,
            height=170,
        )

        assert isinstance(calculator, Walking)
        assert calculator.distance() == pytest.approx(0.8)

    def test_unknown_activity(self) -> None:
        with pytest.raises(UnknownActivityError):
            build_calculator(
                "cycling",
                training_type="Cycling",
                action=100,
                duration=timedelta(minutes=10),
                weight=70,
            )

    def test_walking_requires_height(self) -> None:
        with pytest.raises(MissingParameterError):
            build_calculator(
                "walking",
                training_type="Walking",
                action=100,
                duration=timedelta(minutes=10),
                weight=70,
            )

    def test_swimming_requires_pool(self) -> None:
        with pytest.raises(MissingParameterError):
            build_calculator(
                "swimming",
                training_type="Swimming",
                action=100,
                duration=timedelta(minutes=10),
                weight=70,
                length_pool=25,
            )

    def test_errors_are_value_errors(self) -> None:
        assert issubclass(UnknownActivityError, ValueError)
        assert issubclass(MissingParameterError, ValueError)
