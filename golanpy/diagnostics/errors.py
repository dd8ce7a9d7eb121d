"""Internal (protocol) errors.

These signal a bug in the recognizer/builder contract or an impossible tree
shape. They are never turned into diagnostics.
"""


class InternalError(RuntimeError):
    """Unrecoverable programming error inside golanpy."""


class BuilderError(InternalError):
    """AST builder stack protocol violation."""
