"""Rank candidate lists against a profile.

Sorting is stable, so candidates with equal scores keep their input order.
"""

import logging
from collections.abc import Sequence

from models.schemas.candidates import CandidateCompany, CandidatePerson
from models.schemas.match_result import CompanyMatch, PersonMatch
from models.schemas.profile import StructuredProfile
from services.scoring import score_company, score_person
from services.vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)


def rank_companies(
    companies: Sequence[CandidateCompany] | None,
    profile: StructuredProfile | None,
    vocab: Vocabulary = DEFAULT_VOCABULARY,
) -> list[CompanyMatch]:
    """Score every company and return them best match first."""
    if not companies or profile is None:
        return []

    matches = [score_company(company, profile, vocab) for company in companies]
    logger.debug("Ranked %d companies", len(matches))
    return sorted(matches, key=lambda m: m.match_score, reverse=True)


def rank_people(
    people: Sequence[CandidatePerson] | None,
    profile: StructuredProfile | None,
    vocab: Vocabulary = DEFAULT_VOCABULARY,
) -> list[PersonMatch]:
    """Score every person and return them best match first."""
    if not people or profile is None:
        return []

    matches = [score_person(person, profile, vocab) for person in people]
    logger.debug("Ranked %d people", len(matches))
    return sorted(matches, key=lambda m: m.match_score, reverse=True)
