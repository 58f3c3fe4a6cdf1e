"""Tests for WriterSettings."""

import pytest
from pydantic import ValidationError

from influxline import Precision, Timestamp, TimestampOptions, TimestampPolicy
from influxline.config import WriterSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the caller's environment and .env file."""
    for name in ("PRECISION", "TIMESTAMP_POLICY", "TIMESTAMP", "STRICT", "INSERT_TO_STDOUT"):
        monkeypatch.delenv(f"INFLUXLINE_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = WriterSettings()
    assert settings.precision is Precision.NS
    assert settings.timestamp_policy is TimestampPolicy.FROM_POINT
    assert not settings.strict
    assert not settings.insert_to_stdout
    assert settings.timestamp_options() == TimestampOptions.from_point()


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("INFLUXLINE_PRECISION", "ms")
    monkeypatch.setenv("INFLUXLINE_TIMESTAMP_POLICY", "none")
    monkeypatch.setenv("INFLUXLINE_STRICT", "true")

    settings = WriterSettings()

    assert settings.precision is Precision.MS
    assert settings.strict
    assert settings.timestamp_options() == TimestampOptions.none()


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("INFLUXLINE_PRECISION=us\n")
    assert WriterSettings().precision is Precision.US


def test_use_policy_builds_fixed_timestamp():
    settings = WriterSettings(timestamp_policy="use", timestamp=1613925577)
    assert settings.timestamp_options() == TimestampOptions.use(Timestamp(1613925577))


def test_use_policy_requires_timestamp():
    with pytest.raises(ValidationError, match="timestamp is required"):
        WriterSettings(timestamp_policy="use")


def test_invalid_precision():
    with pytest.raises(ValidationError):
        WriterSettings(precision="minutes")


@pytest.mark.parametrize("policy", ["none", "from_point"])
def test_timestamp_rejected_without_use_policy(policy):
    with pytest.raises(ValidationError, match="only allowed when timestamp_policy is 'use'"):
        WriterSettings(timestamp_policy=policy, timestamp=42)
