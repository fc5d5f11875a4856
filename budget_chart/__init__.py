"""
Budget Chart - Source Package

A small budget visualisation tool: twelve months of income and expense
figures are collected from a form, validated, and drawn as a grouped
bar chart that can be downloaded as a PNG.

DESIGN PRINCIPLES:
1. Validate every field on every pass
2. Fail visibly, never half-render
3. At most one live chart per session
4. UI collaborators are swappable interfaces
"""

__version__ = "1.0.0"
__author__ = "Budget Chart Team"
