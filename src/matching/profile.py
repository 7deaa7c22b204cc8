"""Profile loading and validation utilities."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from src.config.settings import Settings, get_settings
from src.matching.models import UserProfile


class ProfileService:
    """Service for loading and validating candidate profiles."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def load_profile(self, path: Path | str | None = None) -> UserProfile:
        """Load and validate a profile from YAML or JSON.

        Raises:
            FileNotFoundError: The profile file does not exist.
            ValueError: The file cannot be parsed or is not a mapping.
            pydantic.ValidationError: The mapping is not a valid profile.
        """
        profile_path = Path(path) if path is not None else self.settings.profile_path
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile_path}")

        suffix = profile_path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            data = self._load_yaml(profile_path)
        elif suffix == ".json":
            data = self._load_json(profile_path)
        else:
            data = self._load_unknown(profile_path)

        return UserProfile.model_validate(data)

    def validate_profile(self, profile: UserProfile) -> list[str]:
        """Return warnings for fields whose absence lowers match confidence."""
        warnings: list[str] = []

        if not profile.skills:
            warnings.append("Skills list is empty")
        if profile.years_of_experience is None:
            warnings.append("Years of experience not set")
        if profile.preferences.salary_range is None:
            warnings.append("Desired salary range not set")
        if not profile.location and not profile.preferences.remote:
            warnings.append("No location and remote work not accepted")

        return warnings

    def _load_yaml(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML profile: {path}") from e
        return _require_mapping(data, path)

    def _load_json(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON profile: {path}") from e
        return _require_mapping(data, path)

    def _load_unknown(self, path: Path) -> dict:
        """Auto-detect and load a profile when the file extension is unknown."""
        raw = path.read_text(encoding="utf-8")

        # JSON first if it looks like JSON, otherwise YAML (a superset anyway).
        if raw.lstrip().startswith("{"):
            try:
                return _require_mapping(json.loads(raw), path)
            except json.JSONDecodeError:
                pass

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid profile format: {path}") from e
        return _require_mapping(data, path)


def _require_mapping(data: object, path: Path) -> dict:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a mapping/dict: {path}")
    return data
