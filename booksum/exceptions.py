"""
Custom exceptions for the summarization pipeline.
Callers only need to catch SummarizationError; its subclasses tell
transient resource failures apart from content failures.
"""

class PipelineError(Exception):
    """Base class for all pipeline exceptions."""
    pass


class ConfigurationError(PipelineError):
    """Raised when there's an error with the pipeline configuration."""
    pass


class SummarizationError(PipelineError):
    """Raised when a summary could not be generated."""
    pass


class ResourceUnavailableError(SummarizationError):
    """Raised when a model or corpus the pipeline needs is missing. A later call may succeed."""
    pass


class ModelLoadError(ResourceUnavailableError):
    """Raised when the embedding model fails to load."""
    pass


class SynonymSourceError(ResourceUnavailableError):
    """Raised when the synonym database cannot be loaded."""
    pass


class ComputationError(SummarizationError):
    """Raised when a scoring computation is undefined (empty input, zero vector, shape mismatch)."""
    pass
