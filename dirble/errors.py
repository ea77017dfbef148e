"""Error taxonomy for command-line parsing.

Every failure is terminal: the CLI maps it to a diagnostic and an exit
status, it is never retried or replaced by a default.
"""
class DirbleError(Exception):
    exit_code = 1
    show_usage = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(DirbleError):
    """Structural problem with the argument vector."""

    exit_code = 2
    show_usage = True


class MissingRequiredArgument(UsageError):
    def __init__(self, flag: str, show_help: bool = False):
        super().__init__(f"the required argument '{flag}' was not provided")
        self.flag = flag
        self.show_help = show_help


class ConflictingArguments(UsageError):
    def __init__(self, first: str, second: str):
        super().__init__(f"the argument '{first}' cannot be used with '{second}'")
        self.first = first
        self.second = second


class UnsatisfiedRequirement(UsageError):
    def __init__(self, flag: str, required: str):
        super().__init__(f"the argument '{flag}' requires '{required}'")
        self.flag = flag
        self.required = required


class UnknownArgument(UsageError):
    def __init__(self, token: str):
        super().__init__(f"found argument '{token}' which wasn't expected")
        self.token = token


class UnexpectedArgument(UsageError):
    def __init__(self, token: str):
        super().__init__(f"unexpected positional argument '{token}'")
        self.token = token


class MissingValue(UsageError):
    def __init__(self, flag: str):
        super().__init__(f"the argument '{flag}' requires a value but none was supplied")
        self.flag = flag


class RepeatedArgument(UsageError):
    def __init__(self, flag: str):
        super().__init__(f"the argument '{flag}' was provided more than once")
        self.flag = flag


class InvalidTargetScheme(DirbleError):
    def __init__(self, value: str):
        super().__init__(
            f"invalid target '{value}': the target URI must start with http:// or https://"
        )
        self.value = value


class InvalidNumericArgument(DirbleError):
    def __init__(self, field: str, value: str):
        super().__init__(
            f"invalid value '{value}' for '{field}': expected a positive integer"
        )
        self.field = field
        self.value = value


class ExtensionFileUnavailable(DirbleError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"could not read extension file '{path}': {reason}")
        self.path = path
        self.reason = reason


class HelpRequested(DirbleError):
    """Not a failure: -h/--help was given."""

    exit_code = 0

    def __init__(self):
        super().__init__("help requested")


class VersionRequested(DirbleError):
    exit_code = 0

    def __init__(self, text: str):
        super().__init__(text)
