"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging
import os

from design_health.infrastructure.di.container import DesignHealthContainer
from design_health.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    logging.basicConfig(
        level=os.environ.get("DESIGN_HEALTH_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    container = DesignHealthContainer()

    deps = CLIDependencies(
        score_use_case=container.get_score_use_case(),
        snapshot_gateway=container.get_snapshot_gateway(),
        reporter=container.get_reporter(),
        guidance_service=container.get_guidance_service(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
