class ConfigurationError(Exception):
    """Raised when the publisher cannot run with the resolved settings."""


class TagExistsError(Exception):
    def __init__(self, tag: str):
        super().__init__(f"Tag '{tag}' already exists")
        self.tag: str = tag


class OperationAborted(Exception):
    """Raised when the operator declines to continue."""


class GitCommandError(RuntimeError):
    def __init__(self, command: str, returncode: int, stderr: str = ""):
        message = f"'{command}' failed with code {returncode}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
        self.command: str = command
        self.returncode: int = returncode
        self.stderr: str = stderr
