"""
PhishGuard Detection Module

Heuristic risk scoring for web addresses: seven independent signal
detectors, string similarity primitives, score aggregation and
classification.
"""

from .engine import (
    PhishingEngine,
    get_phishing_engine,
    init_phishing_engine,
    analyze_url,
)

from .scorer import RiskScorer

from .similarity import (
    levenshtein_distance,
    normalized_similarity,
    is_character_substitution,
)

from .prescreen import prescreen_url
from .actions import recommend_action

from .rules import (
    DetectionRule,
    rule_registry,
    get_all_rules,
    get_rules_by_category,
)

__all__ = [
    # Engine
    'PhishingEngine',
    'get_phishing_engine',
    'init_phishing_engine',
    'analyze_url',

    # Scorer
    'RiskScorer',

    # Similarity
    'levenshtein_distance',
    'normalized_similarity',
    'is_character_substitution',

    # Navigation
    'prescreen_url',
    'recommend_action',

    # Rules
    'DetectionRule',
    'rule_registry',
    'get_all_rules',
    'get_rules_by_category',
]
