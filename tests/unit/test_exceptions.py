"""Unit tests for living_governance.exceptions - centralized exception hierarchy."""

from __future__ import annotations

import pytest

from living_governance.exceptions import (
    CoverageScoreMismatchError,
    EmptyEvaluationSetError,
    IntegrityError,
    KnowledgeError,
    KnowledgeKindError,
    LivingGovernanceError,
    MalformedScoreTotalError,
    UnknownEvaluationKeyError,
    UnknownKnowledgeError,
)


class TestLivingGovernanceError:
    """Base exception class tests."""

    def test_inherits_from_exception(self) -> None:
        assert issubclass(LivingGovernanceError, Exception)

    @pytest.mark.parametrize(
        "exc_type",
        [
            KnowledgeError,
            EmptyEvaluationSetError,
            UnknownKnowledgeError,
            KnowledgeKindError,
            IntegrityError,
            MalformedScoreTotalError,
            CoverageScoreMismatchError,
            UnknownEvaluationKeyError,
        ],
    )
    def test_catches_all_subclasses(self, exc_type: type[Exception]) -> None:
        with pytest.raises(LivingGovernanceError, match="detail"):
            raise exc_type("detail")


class TestFamilies:
    """Knowledge and integrity errors are separate families."""

    def test_knowledge_family(self) -> None:
        assert issubclass(EmptyEvaluationSetError, KnowledgeError)
        assert issubclass(UnknownKnowledgeError, KnowledgeError)
        assert issubclass(KnowledgeKindError, KnowledgeError)
        assert not issubclass(UnknownKnowledgeError, IntegrityError)

    def test_integrity_family(self) -> None:
        assert issubclass(MalformedScoreTotalError, IntegrityError)
        assert issubclass(CoverageScoreMismatchError, IntegrityError)
        assert issubclass(UnknownEvaluationKeyError, IntegrityError)
        assert not issubclass(MalformedScoreTotalError, KnowledgeError)
