class WritewellError(Exception):
    """Base class for errors raised by the writing backend."""


class ConfigurationError(WritewellError):
    """Process configuration is unusable; the server must not start."""


class UpstreamError(WritewellError):
    """The model provider failed or could not be reached."""


class EmptyUpstreamResponse(UpstreamError):
    """The model provider answered, but with no usable text."""


class OperationFailed(WritewellError):
    """A writing operation could not produce a result for the caller."""
