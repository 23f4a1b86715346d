"""Starting helper programs: openers, plumbers and new terminals."""

from __future__ import annotations

import os
import subprocess
import sys


def open_copied(command, clipboard):
    """Run ``command`` on the clipboard text in the background; return the shell status."""
    if not clipboard:
        print("Warning: nothing copied to clipboard", file=sys.stderr)
        return None
    return subprocess.run(f'{command} "{clipboard}"&', shell=True, check=False).returncode


def cwd_of_pid(pid):
    """Return the resolved working directory of process ``pid``."""
    return os.path.realpath(f"/proc/{pid}/cwd")


def new_terminal(pid, program="st"):
    """Start ``program`` in the working directory of process ``pid``."""
    cwd = cwd_of_pid(pid)
    try:
        return subprocess.Popen([program], cwd=cwd if os.path.isdir(cwd) else None)
    except OSError as exc:
        raise RuntimeError(f"fork failed: {exc}") from exc


def plumb(command, selection, pid):
    """Run ``command selection`` in the directory of ``pid`` and wait; return its status."""
    if selection is None:
        return None
    try:
        return subprocess.run(
            [command, selection], cwd=f"/proc/{pid}/cwd", check=False
        ).returncode
    except OSError:
        return 1