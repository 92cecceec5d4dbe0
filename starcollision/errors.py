class StarCollisionError(Exception):
    """Base class for everything the renderers raise."""


class InputValidationError(StarCollisionError, ValueError):
    pass


class DegenerateCurveError(StarCollisionError, ValueError):
    """A curve has zero length where its length is used as a divisor."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"curve {name!r} has zero length; cannot normalize progress along it")
