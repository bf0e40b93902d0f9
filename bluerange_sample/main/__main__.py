"""
Main module entry point.

This allows running the sample as: python -m bluerange_sample.main
"""

from .cli import main

if __name__ == "__main__":
    main()
