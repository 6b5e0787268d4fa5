"""Core git utilities and subprocess wrappers."""

import asyncio
import os
import shlex
import subprocess


async def run(cmd, cwd=None, strip=True):
    """
    Run a command and return its decoded output.

    Accepts either a string (split using shlex) or an argv list. We avoid invoking
    a shell so file paths containing characters like '(' and ')' are handled
    safely. Diff bodies should be fetched with ``strip=False`` so the patch text
    is returned exactly as git printed it.

    Raises subprocess.CalledProcessError on a non-zero exit.
    """
    args = list(cmd) if isinstance(cmd, (list, tuple)) else shlex.split(cmd)
    proc = await asyncio.create_subprocess_exec(
        *args,
        cwd=cwd or os.getcwd(),
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await proc.communicate()
    out = stdout.decode("utf-8", errors="ignore")
    if proc.returncode != 0:
        raise subprocess.CalledProcessError(
            proc.returncode,
            args,
            output=out,
            stderr=stderr.decode("utf-8", errors="ignore"),
        )
    return out.strip() if strip else out


async def try_run(cmd, cwd=None):
    """Return stripped output, or None if the command failed or git is missing."""
    try:
        return await run(cmd, cwd=cwd)
    except (subprocess.CalledProcessError, OSError):
        return None
