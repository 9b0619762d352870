"""
Review statistics.

Pure computation over review lists plus the reactive aggregator.
"""
