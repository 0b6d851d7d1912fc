"""Entry point for running chart-axes as a module.

Usage:
    python -m chart_axes [options] COMMAND [args...]
"""

from chart_axes.cli import main


if __name__ == "__main__":
    main()
