"""
Entry point for running the demo host as a module: `python -m colorful_logger`

The `colorful-logger` console script defined in pyproject.toml calls the same
`main()` function.
"""

from .main import main

if __name__ == "__main__":
    main()
