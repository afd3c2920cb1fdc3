"""
Display module.

Provides rendering for the word graph:
- components.charts: Plotly figure of words and weighted edges
"""
