"""
Exceptions raised by the generator.

Every failure is fatal: nothing in the pipeline catches these, the run
aborts and the CLI exits non-zero.
"""


class GeneratorError(Exception):
    """Base class for all generator failures."""


class MissingDeclarationError(GeneratorError, LookupError):
    """A required namespace, interface or type name does not exist."""


class UnexpectedShapeError(GeneratorError, ValueError):
    """A declaration does not have the shape the generator knows how to rewrite."""
