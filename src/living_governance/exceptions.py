"""Centralized exception hierarchy for the living-governance package.

All domain-specific exceptions inherit from ``LivingGovernanceError`` so
callers can catch the entire family with a single ``except`` clause.
"""

from __future__ import annotations


class LivingGovernanceError(Exception):
    """Base exception for all living-governance errors."""


# ---------------------------------------------------------------------------
# Knowledge errors
# ---------------------------------------------------------------------------


class KnowledgeError(LivingGovernanceError):
    """Base exception for knowledge lookup and derivation."""


class EmptyEvaluationSetError(KnowledgeError):
    """Raised when confidence classification has no dated evaluations."""


class UnknownKnowledgeError(KnowledgeError):
    """Raised when a knowledge object or archive is not registered."""


class KnowledgeKindError(KnowledgeError):
    """Raised when a registered knowledge object is not of the requested kind."""


# ---------------------------------------------------------------------------
# Integrity errors
# ---------------------------------------------------------------------------


class IntegrityError(LivingGovernanceError):
    """Base exception for editorial integrity violations."""


class MalformedScoreTotalError(IntegrityError):
    """Raised when a score total does not equal the sum of its sub-scores."""


class CoverageScoreMismatchError(IntegrityError):
    """Raised when a coverage score disagrees with its evaluation total."""


class UnknownEvaluationKeyError(IntegrityError):
    """Raised when a framework references a detailed evaluation that is absent."""
