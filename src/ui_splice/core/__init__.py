"""
Core Package.

Contains the integration pipeline and its three stages:
- Style Normalizer (``formatter``)
- Quality Analyzer & Remediator (``quality``)
- Import Resolution Engine (``imports``)
"""
