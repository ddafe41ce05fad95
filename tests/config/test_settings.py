"""Tests for TierSettings — unified settings with TOML source."""

from pathlib import Path

import pytest

from tierctl.config.settings import TierSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = TierSettings.from_cli(workspace_root=tmp_path)
        assert settings.workspace_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.storage.directory == ".tierctl"
        assert settings.board.new_tier_label == "New Tier"

    def test_paths(self, tmp_path: Path) -> None:
        settings = TierSettings.from_cli(workspace_root=tmp_path)
        assert settings.storage_dir == tmp_path / ".tierctl"
        assert settings.snapshot_path == tmp_path / ".tierctl" / "board.json"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TierSettings.from_cli(workspace_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "tierctl.toml").write_text('[storage]\nsnapshot_name = "ranks.json"\n')
        settings = TierSettings.from_cli(workspace_root=tmp_path)
        assert settings.storage.snapshot_name == "ranks.json"
        assert settings.storage.directory == ".tierctl"  # default preserved
        assert settings.snapshot_path.name == "ranks.json"

    def test_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "tierctl.toml").write_text("")
        child = tmp_path / "sub"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = TierSettings.from_cli()
        assert settings.workspace_root == tmp_path.resolve()
        assert settings.config_path == tmp_path.resolve() / "tierctl.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[images]\nmax_bytes = 1024\n")
        settings = TierSettings.from_cli(config_path=str(custom), workspace_root=tmp_path)
        assert settings.images.max_bytes == 1024
        assert settings.config_path == custom

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        import click

        with pytest.raises(click.ClickException, match="not found"):
            TierSettings.from_cli(config_path=str(tmp_path / "gone.toml"))

    def test_root_from_storage_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".tierctl").mkdir()
        child = tmp_path / "sub"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = TierSettings.from_cli()
        assert settings.workspace_root == tmp_path.resolve()
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        import click

        (tmp_path / "tierctl.toml").write_text("[board\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TierSettings.from_cli(workspace_root=tmp_path)


class TestPriority:
    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = TierSettings.from_cli(
            workspace_root=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "tierctl.toml").write_text("[images]\nmax_bytes = 1024\n")
        monkeypatch.setenv("TIERCTL_IMAGES__MAX_BYTES", "2048")
        settings = TierSettings.from_cli(workspace_root=tmp_path)
        assert settings.images.max_bytes == 2048

    def test_cli_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIERCTL_QUIET", "false")
        settings = TierSettings.from_cli(workspace_root=tmp_path, quiet=True)
        assert settings.quiet is True
