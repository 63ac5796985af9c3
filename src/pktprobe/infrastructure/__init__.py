"""
Infrastructure layer for PktProbe
"""
