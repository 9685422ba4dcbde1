class PageSimError(ValueError):
    """Base class for input errors raised before a simulation starts."""


class ParseError(PageSimError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"Invalid page reference: {token!r}")


class InvalidCapacity(PageSimError):
    def __init__(self, frames):
        self.frames = frames
        super().__init__(f"Frame count must be a non-negative integer, got {frames!r}")


class UnknownPolicy(PageSimError):
    def __init__(self, name, choices):
        self.name = name
        super().__init__(f"Unknown policy {name!r}; choose from {', '.join(choices)}")
