class LLMError(RuntimeError):
    pass


class LLMValidationError(LLMError):
    """Raised when input handed to or received from a provider has an unusable shape."""
