"""
simplefin-cli: a command-line client for SimpleFIN account summaries.
"""

__version__ = "0.1.0"
