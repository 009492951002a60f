"""Locating the running binary and starting a fresh copy of it."""
from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from ..errors import ExecutableNotFound

# Module run when relaunching from a source checkout
ENTRY_MODULE = "launch_gate.main"


def resolve_executable(override: Optional[str] = None) -> List[str]:
    """Return the command prefix that starts this application again.

    Frozen builds relaunch their own binary; source installs relaunch the
    interpreter with the entry module.

    Raises:
        ExecutableNotFound: if the binary is not on disk
    """
    if override:
        binary = override
        command = [override]
    elif getattr(sys, "frozen", False):
        binary = sys.executable
        command = [sys.executable]
    else:
        binary = sys.executable
        command = [sys.executable, "-m", ENTRY_MODULE]

    if not binary or not Path(binary).is_file():
        raise ExecutableNotFound(binary or "<unknown>")
    return command


def spawn_detached(command: Sequence[str]) -> subprocess.Popen:
    """Start `command` without keeping any tie to it.

    The child gets its own session (POSIX) or detached console (Windows) so it
    survives this process exiting immediately afterwards.
    """
    log = logging.getLogger("relaunch")
    kwargs = {
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
        "stdin": subprocess.DEVNULL,
        "close_fds": True,
    }
    if os.name == "nt":
        kwargs["creationflags"] = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
    else:
        kwargs["start_new_session"] = True

    process = subprocess.Popen(list(command), **kwargs)
    log.info(f"Relaunched with PID {process.pid}: {' '.join(command)}")
    return process
