"""
Risk Scoring Engine
Pure transforms behind the four worksheet stages
"""
from risk_worksheet.scoring.analysis import aggregate, analyze, classify, magnitude
from risk_worksheet.scoring.models import (
    AnalyzedRisk,
    PrioritizedRisk,
    PriorityThresholds,
    RiskComparison,
    RiskSnapshot,
    RiskSourceCatalog,
    RiskSourceCategory,
    RiskSourceIndicator,
    SourceScores,
)
from risk_worksheet.scoring.monitoring import compare
from risk_worksheet.scoring.prioritization import prioritize
from risk_worksheet.scoring.sources import aggregate_sources, score_category

__all__ = [
    'aggregate',
    'aggregate_sources',
    'analyze',
    'classify',
    'compare',
    'magnitude',
    'prioritize',
    'score_category',
    'AnalyzedRisk',
    'PrioritizedRisk',
    'PriorityThresholds',
    'RiskComparison',
    'RiskSnapshot',
    'RiskSourceCatalog',
    'RiskSourceCategory',
    'RiskSourceIndicator',
    'SourceScores',
]
