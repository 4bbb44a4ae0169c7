"""Knowledge freshness and confidence classification.

Classifies how trustworthy a knowledge object's data currently is from
the time elapsed since its last review, relative to its validity window.

Two reference dates are in play and are deliberately kept apart:

* :func:`get_confidence_status` measures age from the most recent
  ``evaluation_date`` across the detailed evaluations.
* :func:`is_stale` measures age from the top-level ``evaluation.date``.

A knowledge object whose detailed evaluations were refreshed without
bumping ``evaluation.date`` can therefore report "Fresh" confidence while
``is_stale`` is true.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from enum import StrEnum
from fractions import Fraction
from typing import TYPE_CHECKING, Protocol

import structlog
from pydantic import BaseModel, ConfigDict, Field

from living_governance.exceptions import EmptyEvaluationSetError
from living_governance.knowledge.models import as_utc

if TYPE_CHECKING:
    from living_governance.knowledge.models import Evaluation, KnowledgeObject

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

DEFAULT_VALID_DAYS = 90
SECONDS_PER_DAY = 60 * 60 * 24

# Exact fractions keep tier boundaries free of float rounding
FRESH_FRACTION = Fraction(3, 10)
AGING_FRACTION = Fraction(7, 10)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class Evaluated(Protocol):
    """Anything carrying a top-level evaluation."""

    @property
    def evaluation(self) -> Evaluation: ...


class ConfidenceTier(StrEnum):
    """Freshness tier of a knowledge object."""

    FRESH = "fresh"
    AGING = "aging"
    STALE = "stale"
    EXPIRED = "expired"
    UNKNOWN = "unknown"


class ConfidenceStatus(BaseModel):
    """Derived confidence of a knowledge object at a point in time."""

    model_config = ConfigDict(frozen=True)

    confidence: float = Field(ge=0.0, le=1.0)
    status: str
    days_until_stale: int = Field(ge=0)
    tier: ConfidenceTier


FRESH = ConfidenceStatus(
    confidence=1.0,
    status="Fresh - high confidence",
    days_until_stale=0,
    tier=ConfidenceTier.FRESH,
)
AGING = ConfidenceStatus(
    confidence=0.7,
    status="Aging - consider review",
    days_until_stale=0,
    tier=ConfidenceTier.AGING,
)
STALE = ConfidenceStatus(
    confidence=0.5,
    status="Stale - needs review",
    days_until_stale=0,
    tier=ConfidenceTier.STALE,
)
EXPIRED = ConfidenceStatus(
    confidence=0.3,
    status="Expired - review required",
    days_until_stale=0,
    tier=ConfidenceTier.EXPIRED,
)
UNKNOWN = ConfidenceStatus(
    confidence=0.0,
    status="Unknown - no dated evaluations",
    days_until_stale=0,
    tier=ConfidenceTier.UNKNOWN,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def latest_evaluation_date(knowledge: KnowledgeObject) -> datetime:
    """Return the most recent detailed-evaluation date.

    Raises:
        EmptyEvaluationSetError: If the knowledge object has no detailed
            evaluations to reduce over.
    """
    dates = [item.evaluation_date for item in knowledge.detailed_evaluations.values()]
    if not dates:
        msg = f"Knowledge object {knowledge.id!r} has no detailed evaluations"
        raise EmptyEvaluationSetError(msg)
    return max(dates)


def resolve_now(now: datetime | None = None) -> datetime:
    """The instant to measure against, as an aware UTC datetime.

    Naive values are taken as UTC, matching how model dates are normalized.
    """
    return as_utc(now) if now else datetime.now(tz=UTC)


def days_between(reference: datetime, now: datetime) -> float:
    """Fractional days elapsed from ``reference`` to ``now``."""
    return (now - reference).total_seconds() / SECONDS_PER_DAY


def effective_valid_days(
    evaluation: Evaluation,
    default_valid_days: int = DEFAULT_VALID_DAYS,
) -> int:
    """Validity window of an evaluation; absent or zero means the default."""
    return evaluation.valid_days or default_valid_days


def classify_age(days_since: float, valid_days: int) -> ConfidenceStatus:
    """Classify an age in days against a validity window.

    Each tier includes its upper bound, so an age of exactly
    ``0.3 * valid_days`` is still fresh.

    Args:
        days_since: Age in (fractional) days. Negative ages count as fresh.
        valid_days: Validity window in days.

    Returns:
        The matching ``ConfidenceStatus`` with ``days_until_stale`` filled in.
    """
    if days_since > valid_days:
        return EXPIRED

    days_until_stale = max(0, math.floor(valid_days - days_since))
    if days_since <= valid_days * FRESH_FRACTION:
        tier = FRESH
    elif days_since <= valid_days * AGING_FRACTION:
        tier = AGING
    else:
        tier = STALE
    return tier.model_copy(update={"days_until_stale": days_until_stale})


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_confidence_status(
    knowledge: KnowledgeObject,
    now: datetime | None = None,
    default_valid_days: int = DEFAULT_VALID_DAYS,
) -> ConfidenceStatus:
    """Classify a knowledge object's confidence from its newest evaluation.

    Args:
        knowledge: The knowledge object to classify.
        now: Point in time to measure against (defaults to now UTC).
        default_valid_days: Window used when ``evaluation.valid_days`` is unset.

    Returns:
        The confidence status.

    Raises:
        EmptyEvaluationSetError: If there are no detailed evaluations.
    """
    reference = latest_evaluation_date(knowledge)
    current = resolve_now(now)
    days_since = days_between(reference, current)
    valid_days = effective_valid_days(knowledge.evaluation, default_valid_days)

    result = classify_age(days_since, valid_days)
    logger.debug(
        "confidence_classified",
        knowledge_id=knowledge.id,
        reference_date=reference.isoformat(),
        days_since=math.floor(days_since),
        valid_days=valid_days,
        tier=result.tier.value,
    )
    return result


def confidence_or_unknown(
    knowledge: KnowledgeObject,
    now: datetime | None = None,
    default_valid_days: int = DEFAULT_VALID_DAYS,
) -> ConfidenceStatus:
    """Like :func:`get_confidence_status`, degrading to ``UNKNOWN``.

    Intended for display code, which should show a neutral badge rather
    than fail when a knowledge object has nothing to classify.
    """
    try:
        return get_confidence_status(knowledge, now, default_valid_days)
    except EmptyEvaluationSetError:
        logger.warning("confidence_unknown", knowledge_id=knowledge.id)
        return UNKNOWN


def is_stale(
    knowledge: Evaluated,
    now: datetime | None = None,
    default_valid_days: int = DEFAULT_VALID_DAYS,
) -> bool:
    """Whether the top-level evaluation date is past its validity window."""
    current = resolve_now(now)
    days_since = days_between(knowledge.evaluation.date, current)
    return days_since > effective_valid_days(knowledge.evaluation, default_valid_days)


def evaluation_confidence(
    knowledge: Evaluated,
    now: datetime | None = None,
    default_valid_days: int = DEFAULT_VALID_DAYS,
) -> ConfidenceStatus:
    """Classify confidence from the top-level ``evaluation.date``.

    For knowledge objects without per-framework evaluations, where the
    top-level date is the only review date there is.
    """
    current = resolve_now(now)
    days_since = days_between(knowledge.evaluation.date, current)
    return classify_age(
        days_since, effective_valid_days(knowledge.evaluation, default_valid_days)
    )
