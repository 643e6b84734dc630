#!/usr/bin/env python
"""CLI for vidsieve video search."""

from vidsieve.cli import main

if __name__ == "__main__":
    main()
