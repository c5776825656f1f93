"""Console script entry point with production wiring.

Sits at package level (outside adapters) so composition can be wired into
the CLI without the adapters layer importing the composition root.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``chainconf`` console script with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
