#!/usr/bin/env python3
"""
lidoStrategy contract client
Entry point for ``python -m lido_strategy.main``
"""
from .cli import main

if __name__ == "__main__":
    main()
