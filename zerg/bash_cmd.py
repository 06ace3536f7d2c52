"""Run a shell command with one end of a pipe attached to it."""

from __future__ import annotations

import contextlib
import subprocess
from types import TracebackType
from typing import IO

SHELL = "/bin/sh"


class BashCommand:
    """A ``/bin/sh -c`` child whose stdout (mode ``"r"``) or stdin (any other mode) is piped.

    The child runs in its own process group.
    """

    def __init__(self, command: str, mode: str) -> None:
        self.command = command
        self.mode = mode
        self.process: subprocess.Popen[bytes] | None = None
        self.file: IO[bytes] | None = None

    @property
    def pid(self) -> int:
        """Pid of the running child."""
        if self.process is None:
            raise RuntimeError("command has not been started")
        return self.process.pid

    def __enter__(self) -> BashCommand:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.process is not None:
            self.shutdown()

    def run(self) -> IO[bytes]:
        """Start the command and return the parent's end of the pipe."""
        reading = self.mode == "r"
        self.process = subprocess.Popen(
            [SHELL, "-c", self.command],
            stdout=subprocess.PIPE if reading else None,
            stdin=None if reading else subprocess.PIPE,
            start_new_session=True,
        )
        pipe = self.process.stdout if reading else self.process.stdin
        assert pipe is not None
        self.file = pipe
        return pipe

    def shutdown(self) -> int:
        """Close the pipe, kill the child and return its exit status.

        A child killed here reports the negated signal number.
        """
        if self.process is None:
            raise RuntimeError("command has not been started")
        if self.file is not None:
            with contextlib.suppress(BrokenPipeError):
                self.file.close()
            self.file = None
        with contextlib.suppress(ProcessLookupError):
            self.process.kill()
        status = self.process.wait()
        self.process = None
        return status