"""Domain-specific exceptions, framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class PersistenceError(Exception):
    """Raised when the store fails for any reason other than a missing row.

    Covers connection, syntax, constraint and driver failures as well as
    calls that exceed their deadline.
    """

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} failed: {detail}")


class ValidationError(Exception):
    """Raised when submitted form fields break the article rules."""

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class RenderError(Exception):
    """Raised when a template cannot be found, parsed or executed."""

    def __init__(self, template_name: str, message: str):
        self.template_name = template_name
        self.message = message
        super().__init__(f"template '{template_name}': {message}")


class RouteConfigurationError(Exception):
    """Raised when a route is registered twice under the same name."""


class RouteNotFoundError(Exception):
    """Raised when no registered route matches a method and path."""

    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
        super().__init__(f"no route for {method} {path}")


class URLReversalError(Exception):
    """Raised when a URL cannot be built from a route name and parameters."""

    def __init__(self, route_name: str, message: str):
        self.route_name = route_name
        self.message = message
        super().__init__(f"cannot reverse '{route_name}': {message}")
