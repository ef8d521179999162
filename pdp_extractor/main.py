import argparse
import json
import sys
import threading
from dataclasses import asdict
from pathlib import Path
from typing import Any

from pdp_extractor.batch.models import BatchResult
from pdp_extractor.batch.runner import BatchRunner
from pdp_extractor.certifications.status import summarize_certifications
from pdp_extractor.config.settings import Settings
from pdp_extractor.logging.logger import Log
from pdp_extractor.processor.processor import build_processor
from pdp_extractor.processor.progress import ProgressChannel
from pdp_extractor.template.fields import build_template_fields, generated_document_filename


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pdp-extract",
        description="Extract company, workers and certifications from PDP paperwork.",
    )
    parser.add_argument("files", nargs="+", type=Path, help=".eml bundles or loose documents")
    parser.add_argument("--windfarm", default="", help="wind farm name for the template fields")
    parser.add_argument("--output", type=Path, help="write the JSON report here instead of stdout")
    return parser.parse_args(argv)


def build_report(batch: BatchResult, windfarm_name: str, settings: Settings) -> dict[str, Any]:
    summary = summarize_certifications(
        batch.merged, warning_months=settings.certification_warning_months
    )
    return {
        "files": [
            {
                "filename": outcome.filename,
                "state": outcome.state.value,
                "error": outcome.error,
                "attachments": [
                    {
                        "source": extracted.source,
                        "method": extracted.method.value,
                        "char_count": extracted.char_count,
                    }
                    for extracted in outcome.extracted
                ],
            }
            for outcome in batch.outcomes
        ],
        "result": asdict(batch.merged),
        "template_fields": build_template_fields(batch.merged, windfarm_name),
        "document_filename": generated_document_filename(windfarm_name or "windfarm"),
        "certifications": asdict(summary),
    }


def _log_progress(progress: ProgressChannel) -> None:
    for event in progress.events():
        Log.info(f"[{event.step.value}] {event.message}")


def main(argv: list[str] | None = None) -> int:
    """Entry point: read files -> run the batch -> print the JSON report."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    progress = ProgressChannel(maxsize=settings.progress_queue_size)
    consumer = threading.Thread(target=_log_progress, args=(progress,), daemon=True)
    consumer.start()
    try:
        processor = build_processor(settings, progress=progress)
        runner = BatchRunner(processor, max_workers=settings.batch_max_workers)
        batch = runner.run_paths(args.files)
    finally:
        progress.close()
        consumer.join()

    report = build_report(batch, args.windfarm, settings)
    payload = json.dumps(report, ensure_ascii=False, indent=2)
    if args.output is not None:
        args.output.write_text(payload + "\n", encoding="utf-8")
    else:
        sys.stdout.write(payload + "\n")
    return 0 if not batch.failed else 1


if __name__ == "__main__":
    sys.exit(main())
