"""
figurecast CLI - Command-line interface for figure encoding.

Usage:
    figurecast encode figures/circle.yaml
    figurecast encode figures/circle.json --pretty
    figurecast decode captured/message.txt
"""

__version__ = "1.0.0"
