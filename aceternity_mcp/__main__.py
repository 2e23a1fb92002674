"""
Entry point for running as: python -m aceternity_mcp
"""

from .bridge import run

if __name__ == "__main__":
    run()
