class ModelChainException(Exception):
    """Base class of all the errors raised by the model registry."""

    status_code = 500
    message = 'Internal Server Error'

    def __init__(self, message: str = None, status_code: int = None):
        if status_code:
            self.status_code = status_code
        if message:
            self.message = message
        super().__init__(self.message)


class ModelNotFound(ModelChainException, KeyError):
    """The requested model was never registered."""
    status_code = 404

    def __str__(self):
        return self.message


class ConfigurationError(ModelChainException, ValueError):
    """The registry configuration can't be applied."""
    status_code = 400
