"""CLI entry point: python -m superpowers_nextjs"""

from superpowers_nextjs.cli import main

main()
