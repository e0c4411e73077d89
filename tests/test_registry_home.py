"""Tests for registry home detection (infra/registry_home.py).

Folders are created under ``tmp_path``; the platform is mocked for the
setup-command variants.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from talos.config import Settings
from talos.infra.registry_home import (
    RegistryHomeStatus,
    _platform_setup_commands,
    detect_registry_home,
)


class TestDetectRegistryHome:
    def test_everything_present(self, tmp_path: Path) -> None:
        commands = tmp_path / "commands"
        commands.mkdir()
        (commands / "deploy.json").write_text("{}", encoding="utf-8")

        status = detect_registry_home(Settings(home=tmp_path))

        assert status.home_found is True
        assert status.commands_found is True
        assert status.command_names == ("deploy",)
        assert status.setup_commands == ()

    def test_home_without_commands_folder(self, tmp_path: Path) -> None:
        status = detect_registry_home(Settings(home=tmp_path))

        assert status.home_found is True
        assert status.commands_found is False
        assert status.command_names == ()
        assert len(status.setup_commands) > 0

    def test_nothing_present(self, tmp_path: Path) -> None:
        status = detect_registry_home(Settings(home=tmp_path / "missing"))
        assert status.home_found is False
        assert status.commands_found is False


class TestPlatformSetupCommands:
    @patch("talos.infra.registry_home.platform.system", return_value="Windows")
    def test_windows_commands(self, _mock_sys: object) -> None:
        cmds = _platform_setup_commands(Path("C:/Users/me/.talos/commands"))
        assert any("New-Item" in c for c in cmds)

    @patch("talos.infra.registry_home.platform.system", return_value="Linux")
    def test_posix_commands(self, _mock_sys: object) -> None:
        cmds = _platform_setup_commands(Path("/home/me/.talos/commands"))
        assert cmds == ('mkdir -p "/home/me/.talos/commands"',)


class TestRegistryHomeStatus:
    def test_frozen(self, tmp_path: Path) -> None:
        status = RegistryHomeStatus(
            home=tmp_path,
            home_found=True,
            commands_found=True,
            command_names=(),
            setup_commands=(),
        )
        with pytest.raises(AttributeError):
            status.home_found = False  # type: ignore[misc]
