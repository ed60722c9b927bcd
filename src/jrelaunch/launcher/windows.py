"""Windows launcher: CreateProcessW with CREATE_NO_WINDOW.

The command line goes straight to ``CreateProcessW`` (no application name, so
the executable is parsed out of the quoted first token). Handles returned for
the new process and its primary thread are closed before returning; the child
is never waited on.
"""

import ctypes
import logging
from contextlib import ExitStack
from ctypes import wintypes

from jrelaunch.launcher.base import ProcessLauncher
from jrelaunch.models import FailureKind, LaunchResult, OsFamily

log = logging.getLogger(__name__)

CREATE_NO_WINDOW = 0x08000000
NORMAL_PRIORITY_CLASS = 0x00000020
CREATION_FLAGS = CREATE_NO_WINDOW | NORMAL_PRIORITY_CLASS


class STARTUPINFOW(ctypes.Structure):
    _fields_ = [
        ("cb", wintypes.DWORD),
        ("lpReserved", wintypes.LPWSTR),
        ("lpDesktop", wintypes.LPWSTR),
        ("lpTitle", wintypes.LPWSTR),
        ("dwX", wintypes.DWORD),
        ("dwY", wintypes.DWORD),
        ("dwXSize", wintypes.DWORD),
        ("dwYSize", wintypes.DWORD),
        ("dwXCountChars", wintypes.DWORD),
        ("dwYCountChars", wintypes.DWORD),
        ("dwFillAttribute", wintypes.DWORD),
        ("dwFlags", wintypes.DWORD),
        ("wShowWindow", wintypes.WORD),
        ("cbReserved2", wintypes.WORD),
        ("lpReserved2", wintypes.LPBYTE),
        ("hStdInput", wintypes.HANDLE),
        ("hStdOutput", wintypes.HANDLE),
        ("hStdError", wintypes.HANDLE),
    ]


class PROCESS_INFORMATION(ctypes.Structure):
    _fields_ = [
        ("hProcess", wintypes.HANDLE),
        ("hThread", wintypes.HANDLE),
        ("dwProcessId", wintypes.DWORD),
        ("dwThreadId", wintypes.DWORD),
    ]


class Kernel32:
    """The three kernel32 calls the launcher needs."""

    def __init__(self) -> None:
        dll = ctypes.WinDLL("kernel32", use_last_error=True)

        self._create_process = dll.CreateProcessW
        self._create_process.argtypes = [
            wintypes.LPCWSTR,
            wintypes.LPWSTR,
            wintypes.LPVOID,
            wintypes.LPVOID,
            wintypes.BOOL,
            wintypes.DWORD,
            wintypes.LPVOID,
            wintypes.LPCWSTR,
            ctypes.POINTER(STARTUPINFOW),
            ctypes.POINTER(PROCESS_INFORMATION),
        ]
        self._create_process.restype = wintypes.BOOL

        self._close_handle = dll.CloseHandle
        self._close_handle.argtypes = [wintypes.HANDLE]
        self._close_handle.restype = wintypes.BOOL

    def create_process(
        self,
        command_line: ctypes.Array,
        creation_flags: int,
        startup_info: STARTUPINFOW,
        process_info: PROCESS_INFORMATION,
    ) -> bool:
        return bool(
            self._create_process(
                None,
                command_line,
                None,
                None,
                False,
                creation_flags,
                None,
                None,
                ctypes.byref(startup_info),
                ctypes.byref(process_info),
            )
        )

    def close_handle(self, handle: int | None) -> None:
        if not self._close_handle(handle):
            log.warning("CloseHandle(%s) failed: error %d", handle, ctypes.get_last_error())

    def last_error(self) -> int:
        return ctypes.get_last_error()


class WindowsLauncher(ProcessLauncher):
    """Starts the command without a console window via CreateProcessW."""

    os_family = OsFamily.WINDOWS

    def __init__(self, kernel32: Kernel32 | None = None) -> None:
        self._kernel32 = kernel32

    def _api(self) -> Kernel32:
        if self._kernel32 is None:
            self._kernel32 = Kernel32()
        return self._kernel32

    def _start(self, command: str) -> LaunchResult:
        try:
            api = self._api()
        except (AttributeError, OSError) as e:
            return LaunchResult.failed(FailureKind.OS_ERROR, f"kernel32 is unavailable: {e}")

        with ExitStack() as scope:
            # CreateProcessW may write into the command line, so it needs a
            # mutable buffer that outlives the call.
            buffer = ctypes.create_unicode_buffer(command)
            startup_info = STARTUPINFOW()
            startup_info.cb = ctypes.sizeof(STARTUPINFOW)
            process_info = PROCESS_INFORMATION()

            try:
                created = api.create_process(buffer, CREATION_FLAGS, startup_info, process_info)
            except (OSError, ValueError) as e:
                return LaunchResult.failed(FailureKind.OS_ERROR, f"CreateProcessW raised: {e}")

            if not created:
                code = api.last_error()
                log.debug("CreateProcessW failed, GetLastError=%d", code)
                return LaunchResult.failed(
                    FailureKind.CREATE_PROCESS,
                    f"CreateProcessW failed with error code {code}",
                    code,
                )

            scope.callback(api.close_handle, process_info.hProcess)
            scope.callback(api.close_handle, process_info.hThread)
            log.debug(
                "started pid=%d tid=%d", process_info.dwProcessId, process_info.dwThreadId
            )
            return LaunchResult.started()
