"""
Assessment Services Package für EduSync

Dieses Paket enthält die Bewertungslogik für Assessments:
- Validierung der abgegebenen Antworten
- Punkteberechnung
- Speicherung des Ergebnisses (ein Ergebnis pro User und Assessment)

Author: EduSync Development Team
Version: 1.0.0
"""

from .scoring_service import (
    AssessmentScorer,
    SubmittedAnswer,
    SubmissionOutcome,
    calculate_score,
    truncate_score,
    is_passed,
)

__all__ = [
    "AssessmentScorer",
    "SubmittedAnswer",
    "SubmissionOutcome",
    "calculate_score",
    "truncate_score",
    "is_passed",
]
