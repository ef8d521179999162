from pdp_extractor.structured.models import Certification, Company, StructuredResult, Worker


def merge_results(results: list[StructuredResult]) -> StructuredResult:
    """Combine per-file results of one case into a single result.

    The first non-empty company and the first document-level certification
    win. Workers are concatenated in file order without de-duplication.
    Document flags are true if any file set them.
    """
    company = next((r.company for r in results if not r.company.is_empty()), Company())
    certification: Certification | None = next(
        (r.certification for r in results if r.certification is not None), None
    )
    workers: list[Worker] = [worker for r in results for worker in r.workers]
    return StructuredResult(
        company=company,
        workers=workers,
        certification=certification,
        risk_analysis=any(r.risk_analysis for r in results),
        operational_mode=any(r.operational_mode for r in results),
    )
