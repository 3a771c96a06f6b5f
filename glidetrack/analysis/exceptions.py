"""
Analysis Exceptions
"""


class AnalysisException(Exception):
    """Base class for all analysis errors."""


class PreconditionsFailed(AnalysisException):
    """A stage's required input state is missing (or the stage already ran)."""


class AnalysisFailure(AnalysisException):
    """An internal-consistency violation found while computing a stage."""
