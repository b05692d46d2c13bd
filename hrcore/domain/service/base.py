"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Domain services coordinate aggregates with their repositories and the
    event bus. Business rules that belong to a single aggregate stay on the
    aggregate.
    """

    pass
