"""Tests for YAML marker configuration and the policy model."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from domain.marker_config import MarkerConfig
from domain.models import MarkerPolicy


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "pidmarker.yaml"


class TestMarkerConfig:
    def test_defaults_when_only_path_given(self, config_file: Path):
        config_file.write_text("path: /run/app.pid\n")

        config = MarkerConfig.load(config_file)

        assert config.path == Path("/run/app.pid")
        assert config.policy == MarkerPolicy()

    def test_modes_in_any_octal_spelling(self, config_file: Path):
        config_file.write_text(
            "path: run/app.pid\n"
            "create_mode: 0640\n"
            "rewrite_mode: '0o644'\n"
            "dir_mode: '750'\n"
        )

        policy = MarkerConfig.load(config_file).policy

        assert policy.create_mode == 0o640
        assert policy.rewrite_mode == 0o644
        assert policy.dir_mode == 0o750

    def test_bare_integer_mode_is_octal(self, config_file: Path):
        config_file.write_text("path: run/app.pid\ncreate_mode: 400\ndir_mode: 700\n")

        policy = MarkerConfig.load(config_file).policy

        assert policy.create_mode == 0o400
        assert policy.dir_mode == 0o700

    def test_non_mode_scalars_stay_usable(self, config_file: Path):
        config_file.write_text("path: 12345\n")

        assert MarkerConfig.load(config_file).path == Path("12345")

    def test_missing_path_raises(self, config_file: Path):
        config_file.write_text("create_mode: 0600\n")

        with pytest.raises(KeyError):
            MarkerConfig.load(config_file)


class TestMarkerPolicy:
    def test_defaults_are_owner_only(self):
        policy = MarkerPolicy()

        assert policy.create_mode == 0o600
        assert policy.rewrite_mode == 0o600
        assert policy.dir_mode == 0o755

    def test_rejects_out_of_range_mode(self):
        with pytest.raises(ValidationError):
            MarkerPolicy(create_mode=0o1777)

    def test_is_frozen(self):
        with pytest.raises(ValidationError):
            MarkerPolicy().create_mode = 0o644
