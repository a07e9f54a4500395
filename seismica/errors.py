"""Wave engine errors."""


class SeismicaError(Exception):
    """Base class for wave engine errors."""
    pass


class InvalidParameter(SeismicaError, ValueError):
    """A configuration value is outside the domain the engine accepts."""
    pass


class InvalidModelIndex(SeismicaError, IndexError):
    """Model selection does not name a registered model."""
    pass


class ModelValidityError(SeismicaError):
    """Material constants put a model outside its physically valid regime."""
    pass
