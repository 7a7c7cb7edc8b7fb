"""Domain-specific exceptions."""


class SearchServiceError(Exception):
    pass


class QueryValidationError(SearchServiceError):
    """The submitted query is blank; callers treat this as a silent no-op."""


class TransportError(SearchServiceError):
    """Network failure, timeout or non-success HTTP status."""


class ProviderError(SearchServiceError):
    """The search backend answered with an error payload or an unreadable body."""


class StaleResponse(SearchServiceError):
    """A response arrived for a dispatch that is no longer the latest one."""


class ProviderConfigurationError(SearchServiceError):
    pass


class AuthenticationRequired(SearchServiceError):
    pass
