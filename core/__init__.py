"""
Core package - data models and the portable responsive layout logic.
"""
