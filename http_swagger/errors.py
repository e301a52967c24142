class SwaggerConfigError(Exception):
    """Base class for Swagger UI configuration errors"""


class InvalidEnumValueError(SwaggerConfigError, ValueError):
    """A field holds a value outside its accepted set"""

    def __init__(self, field: str, value: str, allowed: list[str]):
        self.field = field
        self.value = value
        self.allowed = allowed
        super().__init__(f"Invalid value {value!r} for '{field}', expected one of {allowed}")


class InvalidDepthError(SwaggerConfigError, ValueError):
    """An expand depth is below -1"""

    def __init__(self, field: str, value: int):
        self.field = field
        self.value = value
        super().__init__(f"Invalid depth {value} for '{field}', expected -1 or greater")
