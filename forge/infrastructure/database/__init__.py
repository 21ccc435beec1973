"""
Database infrastructure package.
"""
