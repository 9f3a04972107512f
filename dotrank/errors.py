class DotRankError(Exception):
    """Base class for every error raised by dotrank."""


class SourceUnavailable(DotRankError, OSError):
    def __init__(self, path, reason=None):
        self.path = str(path)
        self.reason = reason
        msg = f"Could not open file {self.path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MalformedHeader(DotRankError, ValueError):
    pass


class MalformedEdge(DotRankError, ValueError):
    def __init__(self, line, lineno=None):
        self.line = line
        self.lineno = lineno
        where = f" (line {lineno})" if lineno is not None else ""
        super().__init__(f"Invalid edge format{where}: {line}")


class InvalidIdentifier(DotRankError, ValueError):
    def __init__(self, identifier, msg=None):
        self.identifier = identifier
        super().__init__(msg or f"Invalid identifier '{identifier}': must match [A-Za-z][A-Za-z0-9_]*")


class IdentifierTooLong(InvalidIdentifier):
    def __init__(self, identifier, limit):
        self.limit = limit
        super().__init__(identifier, f"Identifier '{identifier[:32]}...' exceeds {limit} characters")


class CapacityExceeded(DotRankError, RuntimeError):
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"Maximum number of nodes reached ({capacity})")


class InvalidArgument(DotRankError, ValueError):
    pass
