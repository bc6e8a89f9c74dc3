# Copyright 2026. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Locate the executable of the running dispatcher.

Subcommands are installed next to the dispatcher, so its own path is the
search directory for them. Each host platform has its own way of asking for
that path; they all sit behind the ``SelfPathResolver`` protocol and
``default_resolver()`` picks one for the running interpreter.
"""

import ctypes
import os
import shutil
import sys
from typing import Callable, Protocol

from binexport.core.commands import EXE_SUFFIX
from binexport.core.errors import ResolutionError

NAME_MAX = 255
MAX_PATH = 260
ERROR_INSUFFICIENT_BUFFER = 122


class SelfPathResolver(Protocol):
    def resolve_self_path(self) -> str: ...


def read_growing(read: Callable[[int], bytes | str], initial_size: int = NAME_MAX) -> bytes | str:
    """Call ``read(size)`` with a growing buffer size until the result fits.

    ``read`` returns at most ``size`` units; a result that fills the whole
    buffer may have been truncated, so the size grows by half and the call
    is repeated. Errors other than a short buffer must be raised by ``read``.
    """
    size = initial_size
    while True:
        result = read(size)
        if len(result) < size:
            return result
        size = 3 * size // 2


def _module_path_error(reason: str) -> ResolutionError:
    return ResolutionError(f"Failed to get module path: {reason}")


class ProcSelfExeResolver:
    """Linux and other systems exposing ``/proc/self/exe``."""

    link = "/proc/self/exe"

    def resolve_self_path(self) -> str:
        libc = ctypes.CDLL(None, use_errno=True)
        readlink = libc.readlink
        readlink.argtypes = [ctypes.c_char_p, ctypes.c_char_p, ctypes.c_size_t]
        readlink.restype = ctypes.c_ssize_t
        link = os.fsencode(self.link)

        def _read(size: int) -> bytes:
            buf = ctypes.create_string_buffer(size)
            length = readlink(link, buf, size)
            if length < 0:
                raise _module_path_error(os.strerror(ctypes.get_errno()))
            return buf.raw[:length]

        return os.fsdecode(read_growing(_read))


class DarwinResolver:
    def resolve_self_path(self) -> str:
        libc = ctypes.CDLL(None)
        get_path = libc._NSGetExecutablePath
        get_path.argtypes = [ctypes.c_char_p, ctypes.POINTER(ctypes.c_uint32)]
        get_path.restype = ctypes.c_int

        def _read(size: int) -> bytes:
            buf = ctypes.create_string_buffer(size)
            bufsize = ctypes.c_uint32(size)
            if get_path(buf, ctypes.byref(bufsize)) != 0:
                # Too small: report a full buffer so the caller grows it.
                return buf.raw
            return buf.value

        # The returned path may still contain symlinks and "..".
        return os.path.realpath(os.fsdecode(read_growing(_read)))


class WindowsResolver:
    def resolve_self_path(self) -> str:
        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        get_module_file_name = kernel32.GetModuleFileNameW
        get_module_file_name.argtypes = [ctypes.c_void_p, ctypes.c_wchar_p, ctypes.c_uint32]
        get_module_file_name.restype = ctypes.c_uint32

        def _read(size: int) -> str:
            buf = ctypes.create_unicode_buffer(size)
            length = get_module_file_name(None, buf, size)
            if length == 0:
                err = ctypes.get_last_error()
                if err != ERROR_INSUFFICIENT_BUFFER:
                    raise _module_path_error(ctypes.FormatError(err))
                return buf[:size]
            return buf[:length]

        return read_growing(_read, MAX_PATH)


class ScriptPathResolver:
    """Path of the launcher script of a non-frozen install.

    Under a regular interpreter the running binary is Python itself, and the
    dispatcher is the console script named by ``argv[0]``. Sibling
    subcommands are installed into the same scripts directory.
    """

    def __init__(self, argv0: str | None = None):
        self.argv0 = argv0

    def resolve_self_path(self) -> str:
        argv0 = sys.argv[0] if self.argv0 is None else self.argv0
        if not argv0:
            raise _module_path_error("program name is empty")
        path = argv0
        if os.sep not in argv0 and not (os.altsep and os.altsep in argv0):
            path = shutil.which(argv0)
            if path is None:
                raise _module_path_error(f"'{argv0}' not found on PATH")
        path = os.path.realpath(path)
        # pip's Windows launcher strips ".exe" from argv[0].
        if os.name == "nt" and not os.path.isfile(path) and os.path.isfile(path + EXE_SUFFIX):
            path += EXE_SUFFIX
        if not os.path.isfile(path):
            raise _module_path_error(f"'{path}' is not a file")
        return path


def default_resolver() -> SelfPathResolver:
    if not getattr(sys, "frozen", False):
        return ScriptPathResolver()
    if sys.platform == "win32":
        return WindowsResolver()
    if sys.platform == "darwin":
        return DarwinResolver()
    return ProcSelfExeResolver()


def resolve_self_path() -> str:
    return default_resolver().resolve_self_path()
