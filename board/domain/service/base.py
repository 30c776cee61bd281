"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span more than one entity, such as
    depth checks against a parent comment or report state transitions.
    """

    pass
