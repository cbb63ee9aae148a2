# ============================================================================
# EXCEPTIONS
# ============================================================================
# STATUS: Shared - used by every layer of the styles generator
# PURPOSE: Exception hierarchy separating contract violations from generation failures
# EXPORTS: ContractViolationError, StylesGeneratorError, ConfigurationError,
#          CatalogValidationError, ResolutionError, AssetError, RenderError, WriterError
# DEPENDENCIES: None (standard library only)
# PATTERNS: Exception hierarchy for error categorization
# ENTRY_POINTS: Raised at component boundaries, caught once in the CLI
# ============================================================================

"""
Custom Exception Hierarchy

Distinguishes between:
1. Contract Violations (programming bugs that need fixing)
2. Generation Failures (deterministic problems in the catalog, the asset
   directory or the output sink)

Generation failures are never retried: every cause is a function of the
catalog and filesystem state, so running again without changing the input
produces the same error. Each subclass carries the context needed to
diagnose the failure (offending id, path or relation).
"""

from typing import List, Optional


class ContractViolationError(TypeError):
    """
    Raised when component contracts are violated (programming bugs).

    These indicate:
    - Wrong types passed to functions
    - Engine invoked with an unvalidated catalog
    - Interface contract violations

    These should NEVER be caught and handled - they indicate bugs
    that need to be fixed in the code.
    """
    pass


class StylesGeneratorError(Exception):
    """
    Base class for expected generation failures.

    Every run either produces the complete document set or fails with
    exactly one of these.
    """
    pass


class ConfigurationError(StylesGeneratorError):
    """
    Catalog or environment configuration error.

    Fatal - the run aborts before validation.

    Examples:
        - Catalog file missing or unreadable
        - Malformed YAML
        - Unknown keys or unknown link relations in the catalog
        - No usable output destination configured
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class CatalogValidationError(StylesGeneratorError):
    """
    One or more catalog-wide invariants failed.

    All violations are collected before raising; ``errors`` keeps the
    individual messages in check order.
    """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"validation errors found: {'; '.join(self.errors)}")


class ResolutionError(StylesGeneratorError):
    """
    A link could not be turned into a path or URL.

    Examples:
        - Relation without a known resource path
        - Both query and extension formatting requested for one href
    """

    def __init__(self, message: str, relation: Optional[str] = None,
                 identifier: Optional[str] = None):
        super().__init__(message)
        self.relation = relation
        self.identifier = identifier


class AssetError(StylesGeneratorError):
    """
    An asset could not be loaded or rendered.

    Examples:
        - asset-filename not present in the asset directory
        - Template syntax error in a stylesheet asset
        - Template references an undefined catalog value
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class RenderError(StylesGeneratorError):
    """A logical resource could not be serialized into the requested format."""
    pass


class WriterError(StylesGeneratorError):
    """
    The output sink rejected a document.

    Examples:
        - Destination directory not writable
        - Blob upload failed
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
