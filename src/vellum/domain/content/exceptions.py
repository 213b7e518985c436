"""Content domain exceptions.

Raised while registering, resolving or querying content-object classes.
"""


class ContentObjectClassNotFoundError(LookupError):
    """Content-object class name could not be resolved."""

    def __init__(self, class_name: str) -> None:
        self.class_name = class_name
        super().__init__(f"Content object class {class_name} does not exist")


class InvalidContentObjectClassError(TypeError):
    """Class is not a concrete content-object class."""

    def __init__(self, cls: object) -> None:
        self.cls = cls
        name = getattr(cls, "__qualname__", repr(cls))
        super().__init__(f"{name} is not a subclass of ContentObject")


class UnknownFieldError(ValueError):
    """Field is not mapped on the content-object class."""

    def __init__(self, class_name: str, field: str) -> None:
        self.class_name = class_name
        self.field = field
        super().__init__(f"Content object class {class_name} has no field {field!r}")
