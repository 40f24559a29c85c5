"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist for the requesting user."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidIdentifierError(Exception):
    """Raised when an externally supplied identifier is missing or malformed."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r}")


class ReportAccessDeniedError(Exception):
    """Raised when a report exists for the user but does not cover the website."""

    def __init__(self, report_id: int, website_id: int):
        self.report_id = report_id
        self.website_id = website_id
        super().__init__(
            f"Report '{report_id}' does not belong to website '{website_id}'"
        )


class AuthenticationError(Exception):
    """Raised when a bearer credential cannot be resolved to a user."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
