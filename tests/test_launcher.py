"""Unit tests for jrelaunch.launcher."""

import ctypes
import os
import stat
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from jrelaunch.command import build_command
from jrelaunch.errors import UnsupportedPlatformError
from jrelaunch.launcher import PosixLauncher, WindowsLauncher, get_launcher, launch
from jrelaunch.launcher.windows import (
    CREATE_NO_WINDOW,
    CREATION_FLAGS,
    NORMAL_PRIORITY_CLASS,
    STARTUPINFOW,
)
from jrelaunch.models import FailureKind, OsFamily

ERROR_PATH_NOT_FOUND = 3


class FakeKernel32:
    """Records CreateProcessW/CloseHandle calls instead of touching the OS."""

    def __init__(self, created=True, error=0, raises=None):
        self.created = created
        self.error = error
        self.raises = raises
        self.calls = []
        self.closed = []

    def create_process(self, command_line, creation_flags, startup_info, process_info):
        self.calls.append(
            SimpleNamespace(
                command=command_line.value,
                flags=creation_flags,
                cb=startup_info.cb,
                show_window=startup_info.wShowWindow,
                pre_process=process_info.hProcess,
            )
        )
        if self.raises is not None:
            raise self.raises
        if self.created:
            process_info.hProcess = 101
            process_info.hThread = 202
            process_info.dwProcessId = 4242
        return self.created

    def close_handle(self, handle):
        self.closed.append(handle)

    def last_error(self):
        return self.error


WINDOWS_COMMAND = build_command(OsFamily.WINDOWS, "jre", "lib", "com.example.Main")
POSIX_COMMAND = build_command(OsFamily.POSIX, "jre", "lib", "com.example.Main")


class TestWindowsLauncher:
    def test_success_closes_process_and_thread_handles(self):
        api = FakeKernel32(created=True)
        result = WindowsLauncher(api).launch(WINDOWS_COMMAND)

        assert result.success is True
        assert result.error is None
        assert sorted(api.closed) == [101, 202]

    def test_failure_reports_last_error_and_closes_nothing(self):
        api = FakeKernel32(created=False, error=ERROR_PATH_NOT_FOUND)
        result = WindowsLauncher(api).launch(WINDOWS_COMMAND)

        assert result.success is False
        assert result.error.kind is FailureKind.CREATE_PROCESS
        assert result.error.code == ERROR_PATH_NOT_FOUND
        assert api.closed == []

    def test_passes_command_line_and_no_window_flags(self):
        api = FakeKernel32()
        WindowsLauncher(api).launch(WINDOWS_COMMAND)

        call = api.calls[0]
        assert call.command == WINDOWS_COMMAND.text
        assert call.flags == CREATE_NO_WINDOW | NORMAL_PRIORITY_CLASS
        assert CREATION_FLAGS & CREATE_NO_WINDOW

    def test_startup_info_is_zeroed_and_sized(self):
        api = FakeKernel32()
        WindowsLauncher(api).launch(WINDOWS_COMMAND)

        call = api.calls[0]
        assert call.cb == ctypes.sizeof(STARTUPINFOW)
        assert call.show_window == 0
        assert call.pre_process is None

    def test_raising_primitive_is_reported_not_propagated(self):
        api = FakeKernel32(raises=OSError("access violation"))
        result = WindowsLauncher(api).launch(WINDOWS_COMMAND)

        assert result.success is False
        assert result.error.kind is FailureKind.OS_ERROR
        assert api.closed == []

    def test_each_launch_closes_its_own_handles(self):
        api = FakeKernel32()
        launcher = WindowsLauncher(api)
        launcher.launch(WINDOWS_COMMAND)
        launcher.launch(WINDOWS_COMMAND)

        assert len(api.calls) == 2
        assert sorted(api.closed) == [101, 101, 202, 202]

    @pytest.mark.skipif(os.name == "nt", reason="kernel32 is available on Windows")
    def test_missing_kernel32_is_a_failed_launch(self):
        result = WindowsLauncher().launch(WINDOWS_COMMAND)

        assert result.success is False
        assert result.error.kind is FailureKind.OS_ERROR


class TestPosixLauncher:
    @patch("jrelaunch.launcher.posix.subprocess.run")
    def test_zero_status_is_started(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0)
        result = PosixLauncher().launch(POSIX_COMMAND)

        assert result.success is True
        mock_run.assert_called_once_with(POSIX_COMMAND.text, shell=True, check=False)

    @patch("jrelaunch.launcher.posix.subprocess.run")
    def test_nonzero_status_is_failed(self, mock_run):
        mock_run.return_value = MagicMock(returncode=1)
        result = PosixLauncher().launch(POSIX_COMMAND)

        assert result.success is False
        assert result.error.kind is FailureKind.EXIT_STATUS
        assert result.error.code == 1

    @patch("jrelaunch.launcher.posix.subprocess.run", side_effect=OSError(2, "No such file"))
    def test_spawn_error_is_failed(self, _run):
        result = PosixLauncher().launch(POSIX_COMMAND)

        assert result.success is False
        assert result.error.kind is FailureKind.OS_ERROR
        assert result.error.code == 2


@pytest.mark.skipif(os.name != "posix", reason="needs /bin/sh")
class TestPosixLauncherShell:
    def test_missing_runtime_returns_false(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = launch(POSIX_COMMAND, OsFamily.POSIX)

        assert result.success is False
        assert result.error.code == 127

    def test_present_runtime_returns_true(self, tmp_path, monkeypatch):
        java = tmp_path / "jre" / "bin" / "java"
        java.parent.mkdir(parents=True)
        java.write_text('#!/bin/sh\n[ "$1" = "-cp" ] && [ "$2" = "lib/*" ] || exit 3\n')
        java.chmod(java.stat().st_mode | stat.S_IXUSR)
        (tmp_path / "lib").mkdir()
        monkeypatch.chdir(tmp_path)

        result = launch(POSIX_COMMAND, OsFamily.POSIX)

        assert result.success is True


class TestGetLauncher:
    def test_returns_variant_per_family(self):
        assert isinstance(get_launcher(OsFamily.POSIX), PosixLauncher)
        assert isinstance(get_launcher(OsFamily.WINDOWS), WindowsLauncher)

    def test_unknown_family_is_unsupported(self):
        with pytest.raises(UnsupportedPlatformError):
            get_launcher("java")

    @patch("jrelaunch.launcher.posix.subprocess.run")
    def test_launch_accepts_plain_string(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0)
        assert launch("true", OsFamily.POSIX)
        mock_run.assert_called_once_with("true", shell=True, check=False)
