"""Errors raised while resolving companion files."""


class SwitcherError(Exception):
    """Base exception for all header-switcher failures."""

    pass


class NotAProjectFileError(SwitcherError):
    """Raised when a file's extension is neither a header nor a source extension."""

    def __init__(self, file: str):
        self.file = file
        super().__init__("Not a C/C++ file.")


class NoWorkspaceError(SwitcherError):
    """Raised when a path must be anchored to a workspace root but none is open."""

    def __init__(self, path: str | None = None):
        self.path = path
        message = "No workspace folder is open."
        if path:
            message = f"No workspace folder is open to resolve '{path}'."
        super().__init__(message)


class NotFoundError(SwitcherError):
    """Raised when every resolution strategy failed to find a companion file."""

    def __init__(self, file: str):
        self.file = file
        super().__init__(f"No companion file found for {file}.")


class SettingsError(SwitcherError):
    """Raised for settings files that cannot be read or validated."""

    pass
