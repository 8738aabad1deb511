## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘


class ArgumentsError(Exception):
    def __init__(self, message: str = "", *, token: str | None = None, offset: int | None = None):
        """Base class for all errors raised while parsing an option string."""
        super().__init__(message)
        self.message: str = message
        self.token: str | None = token
        self.offset: int | None = offset

class ArgumentsSyntaxError(ArgumentsError):
    pass

class ArgumentsValueError(ArgumentsError, ValueError):
    """An option was recognized but its value is rejected."""
    pass

class ArgumentsMemoryError(ArgumentsError, MemoryError):
    pass
