"""
Entry point for running promptlog as a module: `python -m promptlog`

Same `main()` as the `promptlog` console script declared in pyproject.toml.
"""

from .main import main

if __name__ == "__main__":
    main()
