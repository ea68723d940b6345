from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.ats import check_ats_compliance  # noqa: E402
from app.parsing import DocumentExtractionError, UnsupportedDocumentError, parse_document  # noqa: E402
from app.schemas.ats import ATSCheckResult  # noqa: E402


def _format_report(path: str, result: ATSCheckResult) -> str:
    lines = [f"{path}: ATS score {result.score}/100", "", "Sections:"]
    for key, found in result.sections.model_dump().items():
        lines.append(f"  [{'x' if found else ' '}] {key}")
    if result.issues:
        lines.append("")
        lines.append("Issues:")
        lines.extend(f"  - {issue}" for issue in result.issues)
    if result.suggestions:
        lines.append("")
        lines.append("Suggestions:")
        lines.extend(f"  - {suggestion}" for suggestion in result.suggestions)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a local CV (.pdf, .docx, .txt) against ATS heuristics.")
    parser.add_argument("path", help="Path to the CV document")
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON.")
    args = parser.parse_args(argv)

    try:
        parsed = parse_document(args.path)
    except (FileNotFoundError, UnsupportedDocumentError, DocumentExtractionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for warning in parsed.parsing_warnings:
        print(f"warning: {warning}", file=sys.stderr)

    result = check_ats_compliance(parsed.text)
    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
    else:
        print(_format_report(args.path, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
