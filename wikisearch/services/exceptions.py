"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class SessionClosedError(ServiceError):
    pass


class WikiSearchError(ServiceError):
    pass
