"""Workout analytics and classification engine.

Modules:
- io: Normalizing raw workout-log payloads into typed sessions
- models: Typed domain objects
- metrics: WorkScore and estimated one-rep-max calculations
- recognition: Muscle-group classification of logged sets
- aggregation: Muscle balance, weekly trends, consistency and totals
- storage: Tabular export helpers
- report: One-shot pipeline producing every aggregate
"""

__all__ = [
    "io",
    "models",
    "metrics",
    "recognition",
    "aggregation",
    "storage",
    "report",
]
