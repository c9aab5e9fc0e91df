"""Tests for the Profiles module."""

import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from object_faker.profiles.base import DEFAULT_NULL_PROBABILITY, FakeProfile
from object_faker.profiles.loader import ProfileLoader, load_profile


class TestFakeProfile:
    """Tests for FakeProfile class."""

    def test_defaults(self):
        profile = FakeProfile()

        assert profile.name == "default"
        assert profile.seed is None
        assert profile.nullable is False
        assert profile.null_probability == DEFAULT_NULL_PROBABILITY

    def test_effective_null_probability(self):
        assert FakeProfile(null_probability=0.5).effective_null_probability == 0.0
        assert FakeProfile(nullable=True, null_probability=0.5).effective_null_probability == 0.5

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_probability_out_of_range(self, probability):
        with pytest.raises(ValidationError):
            FakeProfile(null_probability=probability)


class TestProfileLoader:
    """Tests for ProfileLoader class."""

    def test_load_flat_yaml(self):
        yaml_content = """
name: fixtures
description: Stable fixtures
seed: 42
locale: de_DE
nullable: true
null_probability: 0.25
"""
        profile = ProfileLoader().load_from_string(yaml_content)

        assert profile.name == "fixtures"
        assert profile.description == "Stable fixtures"
        assert profile.seed == 42
        assert profile.locale == "de_DE"
        assert profile.nullable is True
        assert profile.null_probability == 0.25

    def test_load_nested_yaml(self):
        yaml_content = """
name: nested
faker:
  seed: 7
  nullable: true
metadata:
  owner: qa
"""
        profile = ProfileLoader().load_from_string(yaml_content)

        assert profile.seed == 7
        assert profile.nullable is True
        assert profile.null_probability == DEFAULT_NULL_PROBABILITY
        assert profile.metadata == {"owner": "qa"}

    def test_empty_document(self):
        profile = ProfileLoader().load_from_string("")
        assert profile == FakeProfile()

    def test_non_mapping(self):
        with pytest.raises(ValueError, match="mapping"):
            ProfileLoader().load_from_string("- a\n- b\n")

    def test_non_mapping_faker_section(self):
        with pytest.raises(ValueError, match="faker"):
            ProfileLoader().load_from_string("faker: 3\n")

    def test_load_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nightly.yaml"
            path.write_text("seed: 3\n")

            profile = load_profile(path)

        assert profile.name == "nightly"
        assert profile.seed == 3

    def test_load_missing_file(self):
        with pytest.raises(FileNotFoundError):
            ProfileLoader().load_file("/nonexistent/profile.yaml")
