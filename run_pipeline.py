"""Morning market report entry point.

Usage:
    python run_pipeline.py

Loads config.yaml and the environment, runs ReportPipeline, and reports
success/failure to stdout and the pipeline log.
"""

import sys
from dotenv import load_dotenv

load_dotenv()  # must precede package imports so env vars are available at module load

from morning_report.core.config import load_config, load_settings  # noqa: E402
from morning_report.core.logger import logger  # noqa: E402
from morning_report.pipeline.engine import ReportPipeline  # noqa: E402


def main() -> int:
    """Run the pipeline. Returns 0 on success, 1 on failure."""
    try:
        config = load_config()
    except (FileNotFoundError, ValueError) as exc:
        logger.error(f"run_pipeline: failed to load config: {exc}")
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    try:
        pipeline = ReportPipeline(config=config, settings=load_settings())
        report_path = pipeline.run()
    except Exception as exc:
        logger.error(f"run_pipeline: error generating morning report: {exc}", exc_info=True)
        print(f"ERROR: pipeline failed: {exc}", file=sys.stderr)
        return 1

    print(f"SUCCESS: report written to {report_path}")
    logger.info(f"run_pipeline: completed → {report_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
