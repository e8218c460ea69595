from __future__ import annotations


class VerificationError(Exception):
    pass


class BuildError(VerificationError):
    """The build command could not start, timed out or exited non-zero."""

    def __init__(self, message: str, command: list[str] | None = None,
                 returncode: int | None = None, output: str = ""):
        super().__init__(message)
        self.command = list(command or [])
        self.returncode = returncode
        self.output = output


class PageNotFound(VerificationError):
    def __init__(self, path: str, location: str):
        super().__init__(f"page not found: {path} (looked in {location})")
        self.path = path
        self.location = location
