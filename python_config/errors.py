class PythonConfigError(Exception):
    """Base class for every failure reported by python_config."""


class InterpreterNotFoundError(PythonConfigError):
    def __init__(self, program):
        super().__init__(f"Python interpreter '{program}' not found")
        self.program = program


class QueryError(PythonConfigError):
    def __init__(self, program, returncode, stderr):
        message = f"'{program}' exited with code {returncode}"
        if stderr:
            message += f": {stderr.strip()}"
        super().__init__(message)
        self.program = program
        self.returncode = returncode
        self.stderr = stderr


class MalformedOutputError(PythonConfigError):
    pass


class VersionMismatchError(PythonConfigError):
    pass


class UnsupportedFieldError(PythonConfigError):
    def __init__(self, field, version):
        super().__init__(f"{field} is not available for Python {version}")
        self.field = field
        self.version = version
