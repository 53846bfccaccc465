"""Demo command coordinator."""

from argparse import Namespace
from pathlib import Path

from filehand.core.demo import run_demo
from filehand.domain.types import DemoConfig
from filehand.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class DemoHandler(BaseCommandHandler):
    """Run the demo driver in the requested working directory."""

    async def execute(self, args: Namespace) -> bool:
        work_dir = Path(args.workdir)
        if not work_dir.is_dir():
            logger.error("Demo working directory not found: %s", work_dir)
            return False

        demo_config: DemoConfig = {
            **self.global_config["demo"],
            "search_extension": args.search_ext,
        }
        report = run_demo(work_dir, demo_config, encoding=self.encoding)
        return report.success
