class GatewayError(Exception):
    """Base class of every error raised by the gateway."""
    pass


class ConstructionError(GatewayError, ValueError):
    pass


class StorageError(GatewayError):
    """The wallet storage medium failed."""
    pass


class MalformedIdentity(GatewayError):
    """A stored identity could not be decoded."""
    pass


class NoResponsesError(GatewayError):
    pass


class EndorsementError(GatewayError):
    """An endorsing peer did not return a successful response."""

    def __init__(self, message, peer=None, responses=None):
        super(EndorsementError, self).__init__(message)
        self.peer = peer
        self.message = message
        self.responses = responses or []


class EvaluationError(GatewayError):
    """Every query peer failed. ``messages`` holds one entry per peer in scan order."""

    def __init__(self, messages):
        self.messages = list(messages)
        super(EvaluationError, self).__init__(f'No successful responses received. Errors: {self.messages}')


class SubmitError(GatewayError):
    pass


class CommitError(GatewayError):
    pass


class CommitTimeoutError(GatewayError):

    def __init__(self, transaction_id, timeout):
        self.transaction_id = transaction_id
        self.timeout = timeout
        super(CommitTimeoutError, self).__init__(f'Commit of transaction {transaction_id} not observed within {timeout}')
