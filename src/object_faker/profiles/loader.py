"""Profile Loader for loading fake profiles from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from object_faker.profiles.base import DEFAULT_NULL_PROBABILITY, FakeProfile


class ProfileLoader:
    """Loads profiles from YAML files."""

    def load_file(self, path: Path | str) -> FakeProfile:
        """Load a profile from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded FakeProfile instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Profile file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return self._parse_profile(data, default_name=path.stem)

    def load_from_string(self, content: str) -> FakeProfile:
        """Load a profile from a YAML string."""
        data = yaml.safe_load(content)
        return self._parse_profile(data)

    def _parse_profile(self, data: Any, default_name: str = "default") -> FakeProfile:
        """Parse profile data from YAML structure.

        Accepts either a flat mapping or one nested under a ``faker`` key.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Profile must be a YAML mapping")

        settings = data.get("faker", data)
        if not isinstance(settings, dict):
            raise ValueError("'faker' section must be a mapping")

        return FakeProfile(
            name=data.get("name", default_name),
            description=data.get("description", ""),
            seed=settings.get("seed"),
            locale=settings.get("locale"),
            nullable=settings.get("nullable", False),
            null_probability=settings.get("null_probability", DEFAULT_NULL_PROBABILITY),
            metadata=data.get("metadata", {}),
        )


def load_profile(path: Path | str) -> FakeProfile:
    """Convenience function to load a profile from a file."""
    return ProfileLoader().load_file(path)
