"""
Orchestration layer: merge context, pipeline runner and the exception family.
"""
