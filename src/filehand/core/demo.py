"""Demo driver exercising every file operation in sequence.

The steps are independent: a failing step is recorded in the report and
the driver moves on, so cleanup always runs.
"""

import os
from pathlib import Path

from filehand.constants import (
    DEFAULT_ENCODING,
    DEMO_APPENDED_CONTENT,
    DEMO_BANNER,
    DEMO_INITIAL_CONTENT,
)
from filehand.core import file_ops
from filehand.domain.types import DemoConfig, DemoReport, FileInfo
from filehand.logger import get_logger

logger = get_logger(__name__)


def format_file_info(info: FileInfo) -> list[str]:
    """Render file info as ``key: value`` lines in field order."""
    return [f"{key}: {value}" for key, value in info.items()]


def run_demo(
    work_dir: str | os.PathLike[str],
    demo_config: DemoConfig,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> DemoReport:
    """Run create/append/read/info/mkdir/copy/list/search/cleanup in order.

    Args:
        work_dir: Directory the demo files are created in
        demo_config: File and directory names used by the demo
        encoding: Text encoding for the sample file

    Returns:
        DemoReport with one entry per step

    """
    base = Path(work_dir)
    sample = base / demo_config["sample_file"]
    demo_dir = base / demo_config["directory"]
    copy_target = demo_dir / demo_config["copy_name"]
    report = DemoReport()

    logger.info(DEMO_BANNER)

    report.record(
        "create",
        file_ops.create_file(sample, DEMO_INITIAL_CONTENT, encoding=encoding),
    )
    report.record(
        "append",
        file_ops.append_to_file(
            sample, DEMO_APPENDED_CONTENT, encoding=encoding
        ),
    )

    content = file_ops.read_file(sample, encoding=encoding)
    report.record("read", content is not None, mutating=False)
    logger.info("\nFile content:")
    logger.info("%s", content if content is not None else "<unreadable>")

    info = file_ops.get_file_info(sample)
    report.record("info", info is not None, mutating=False)
    logger.info("\nFile information:")
    if info is None:
        logger.warning("No file information available for %s", sample)
    else:
        for line in format_file_info(info):
            logger.info("%s", line)

    report.record("mkdir", file_ops.create_directory(demo_dir))
    report.record("copy", file_ops.copy_file(sample, copy_target))

    entries = file_ops.list_directory(demo_dir)
    report.record("list", entries is not None, mutating=False)
    logger.info("\nDirectory contents:")
    for entry in entries or []:
        logger.info("%s", entry)

    logger.info("\nSearch results:")
    for match in file_ops.search_files(
        base, demo_config["search_extension"], None
    ):
        logger.info("%s", match)
    report.record("search", base.is_dir(), mutating=False)

    report.record("delete", file_ops.delete_file(sample))
    cleaned = report.record("cleanup", file_ops.remove_tree(demo_dir))
    if cleaned:
        logger.info("\nCleanup complete.")

    if not report.success:
        logger.warning(
            "Demo finished with failed steps: %s",
            ", ".join(report.failed_steps),
        )
    return report
