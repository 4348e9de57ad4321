"""Tests for configuration loading."""

import tempfile
from pathlib import Path
import pytest
import yaml
from relfs.config import Settings, load_settings, apply_settings, load_config, save_config, deep_merge
from relfs.contracts.file_properties import (
    FileProperties,
    get_default_file_properties,
    set_default_file_properties,
)
from relfs.io.files import write_file, create_dir
from relfs.utils.errors import ConfigError


@pytest.fixture
def config_dirs(monkeypatch):
    """Point user and project config lookups at a temporary directory."""
    saved_policy = get_default_file_properties().model_copy()
    with tempfile.TemporaryDirectory() as tmp:
        user = Path(tmp) / "home" / ".relfs" / "config.yaml"
        project = Path(tmp) / "project" / ".relfs" / "config.yaml"
        monkeypatch.setattr("relfs.config.manager.get_user_config_path", lambda: user)
        monkeypatch.setattr(
            "relfs.config.manager.get_project_config_path",
            lambda: project if project.exists() else None,
        )
        yield user, project
    set_default_file_properties(saved_policy)


def write_yaml(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


class TestLoadSettings:
    """Test settings resolution."""

    def test_defaults(self, config_dirs):
        """With no config files every option is off."""
        settings = load_settings()

        assert settings == Settings()
        assert settings.file_properties.override_files is False
        assert settings.finder.detect_cycles is False

    def test_explicit_file(self, config_dirs):
        """An explicit file is merged over the defaults."""
        user, _ = config_dirs
        explicit = user.parent.parent / "explicit.yaml"
        write_yaml(explicit, {"file_properties": {"override_files": True}})

        settings = load_settings(str(explicit))

        assert settings.file_properties.override_files is True
        assert settings.file_properties.file_exists_error is False
        assert settings.finder.skip_unreadable is False

    def test_project_overrides_user(self, config_dirs):
        """Project values win over user values, key by key."""
        user, project = config_dirs
        write_yaml(user, {"finder": {"detect_cycles": True, "skip_unreadable": True}})
        write_yaml(project, {"finder": {"skip_unreadable": False}})

        settings = load_settings()

        assert settings.finder.detect_cycles is True
        assert settings.finder.skip_unreadable is False

    def test_broken_user_config_skipped(self, config_dirs):
        """An invalid user config is ignored with a warning."""
        user, _ = config_dirs
        user.parent.mkdir(parents=True)
        user.write_text("finder: [unclosed", encoding="utf-8")

        assert load_config() == {}

    def test_missing_explicit_file(self, config_dirs):
        """A missing explicit config is an error."""
        with pytest.raises(ConfigError, match="not found"):
            load_settings("/nonexistent/relfs.yaml")

    def test_invalid_yaml(self, config_dirs):
        """Invalid YAML in an explicit config is an error."""
        user, _ = config_dirs
        bad = user.parent.parent / "bad.yaml"
        bad.parent.mkdir(parents=True, exist_ok=True)
        bad.write_text("finder: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(str(bad))

    def test_not_a_mapping(self, config_dirs):
        """A top-level list is rejected."""
        user, _ = config_dirs
        bad = user.parent.parent / "list.yaml"
        write_yaml(bad, ["a", "b"])

        with pytest.raises(ConfigError, match="dictionary"):
            load_settings(str(bad))

    def test_invalid_value(self, config_dirs):
        """Values that are not booleans fail validation."""
        user, _ = config_dirs
        bad = user.parent.parent / "value.yaml"
        write_yaml(bad, {"finder": {"detect_cycles": "sometimes"}})

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_settings(str(bad))


class TestSaveConfig:
    """Test config persistence."""

    def test_save_to_user_path(self, config_dirs):
        """Saving without a path writes the user config."""
        user, _ = config_dirs

        save_config({"finder": {"detect_cycles": True}})

        assert yaml.safe_load(user.read_text(encoding="utf-8")) == {"finder": {"detect_cycles": True}}
        assert load_settings().finder.detect_cycles is True

    def test_deep_merge(self):
        """Nested dictionaries merge; other values are replaced."""
        base = {"a": {"x": 1, "y": 2}, "b": [1]}

        deep_merge(base, {"a": {"y": 3}, "b": [2]})

        assert base == {"a": {"x": 1, "y": 3}, "b": [2]}


class TestApplySettings:
    """Test that loaded settings drive the process-wide file policy."""

    def test_user_config_enables_override(self, config_dirs):
        """override_files in the user config makes write_file replace files."""
        user, _ = config_dirs
        write_yaml(user, {"file_properties": {"override_files": True}})
        target_dir = user.parent.parent
        (target_dir / "a.txt").write_text("old", encoding="utf-8")

        settings = load_settings()

        assert settings.file_properties.override_files is True
        assert get_default_file_properties().override_files is True
        assert write_file("a.txt", "new", base_dir=target_dir) is True
        assert (target_dir / "a.txt").read_text(encoding="utf-8") == "new"

    def test_dir_exists_error_from_config(self, config_dirs):
        """dir_exists_error in an explicit config applies to create_dir."""
        user, _ = config_dirs
        explicit = user.parent.parent / "strict.yaml"
        write_yaml(explicit, {"file_properties": {"dir_exists_error": True}})
        (explicit.parent / "out").mkdir()

        load_settings(str(explicit))

        with pytest.raises(FileExistsError):
            create_dir("out", base_dir=explicit.parent)

    def test_apply_false_leaves_default(self, config_dirs):
        """Loading with apply=False does not touch the process-wide policy."""
        user, _ = config_dirs
        write_yaml(user, {"file_properties": {"override_files": True}})

        settings = load_settings(apply=False)

        assert settings.file_properties.override_files is True
        assert get_default_file_properties().override_files is False

    def test_apply_settings(self, config_dirs):
        """apply_settings installs an in-memory Settings object."""
        apply_settings(Settings(file_properties=FileProperties(file_exists_error=True)))

        assert get_default_file_properties().file_exists_error is True
