# SPDX-License-Identifier: Apache-2.0

"""
Domain logic package for the Mirathi succession compliance engine.

This package contains pure business logic functions with no side effects.
All domain functions are pure and testable without external dependencies.
"""

from .statutes import (
    evaluate_section_40,
    evaluate_section_29,
    evaluate_section_70,
    evaluate_children_act,
    evaluate_marriage_act
)
from .scoring import ScoreResult, aggregate_score, determine_overall_status
from .reports import build_compliance_report

__all__ = [
    "evaluate_section_40",
    "evaluate_section_29",
    "evaluate_section_70",
    "evaluate_children_act",
    "evaluate_marriage_act",
    "ScoreResult",
    "aggregate_score",
    "determine_overall_status",
    "build_compliance_report"
]
