"""Recursive algorithms, each in a direct and a stack-safe version.
"""
