class TypingError(TypeError):
    """The expression is not well-typed under its context, or evaluation
    reached an ill-typed configuration."""
