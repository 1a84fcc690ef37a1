"""Exceptions shared across goatherd."""


class AdvisorError(Exception):
    """Advice could not be produced (configuration, transport or response)."""

    pass


class RetryableError(AdvisorError):
    """Transient error that may be retried (timeouts, connection errors, 5xx)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ChatAPIError(AdvisorError):
    """Non-retryable error status from the chat-completion API."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class ChatResponseError(AdvisorError):
    """Raised when a completion response has no choices[0].message.content."""

    pass


class BootstrapError(Exception):
    """Bootstrap page could not be fetched or did not carry the marker."""

    pass


class RecordNotFoundError(LookupError):
    """Raised when a record id does not resolve to a stored record."""

    def __init__(self, kind: str, record_id):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} not found")
