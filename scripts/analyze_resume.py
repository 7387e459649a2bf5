#!/usr/bin/env python3
"""
Command-line interface for structuring and scoring resumes.

Commands:
    structure - Extract and structure a resume file (PDF, DOCX, TXT) as JSON
    score     - Score a resume file against a job description
    optimize  - Write a keyword-optimized copy of a resume as JSON

Usage:
    python scripts/analyze_resume.py structure resume.pdf
    python scripts/analyze_resume.py structure resume.docx -o outs/resume.json
    python scripts/analyze_resume.py score resume.pdf job.md
    python scripts/analyze_resume.py score resume.txt job.md --json
    python scripts/analyze_resume.py optimize resume.txt job.md -o outs/optimized.json
"""

import json
import time
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from resumatch.contexts.intake import (
    DocumentExtractionError,
    DocumentStructuringError,
    UnsupportedDocumentError,
    structure_resume_file,
)
from resumatch.contexts.intake.logger import _log_error as _log_intake_error
from resumatch.contexts.intake.logger import log_structuring_result, setup_intake_logger
from resumatch.contexts.targeting import analyze_and_optimize, score_resume
from resumatch.contexts.targeting.logger import _log_error as _log_target_error
from resumatch.contexts.targeting.logger import log_analysis_result, setup_targeting_logger
from resumatch.utils.text_processing import truncate_display

app = typer.Typer(
    add_completion=False,
    help="Structure resumes and score them against job descriptions",
    invoke_without_command=True,
)

ResumeFile = Annotated[
    Path,
    typer.Argument(
        help="Resume file (.pdf, .docx or .txt)",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
]
JobFile = Annotated[
    Path,
    typer.Argument(
        help="Plain-text or markdown job description",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
]
OutputFile = Annotated[
    Optional[Path],
    typer.Option("--output", "-o", help="Write JSON here instead of stdout", dir_okay=False),
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_resume(resume_file: Path):
    """Structure a resume file, exiting with a readable error on failure."""
    start = time.time()
    try:
        resume = structure_resume_file(resume_file)
    except (UnsupportedDocumentError, DocumentExtractionError, DocumentStructuringError) as e:
        _log_intake_error(f"{resume_file.name}: {e}")
        typer.echo(f"Error: {resume_file.name}: {e}", err=True)
        raise typer.Exit(code=1)
    log_structuring_result(resume_file.name, resume, time.time() - start)
    return resume


def _read_job(job_file: Path) -> str:
    """Read a job description, exiting with a readable error if it isn't UTF-8 text."""
    try:
        return job_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        _log_target_error(f"{job_file.name}: not UTF-8 text ({e.reason})")
        typer.echo(f"Error: {job_file.name}: job description must be UTF-8 text", err=True)
        raise typer.Exit(code=1)


def _write_json(data: dict, output: Optional[Path]) -> None:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"Wrote {output}")


@app.command("structure")
def structure_command(resume_file: ResumeFile, output: OutputFile = None):
    """Extract and structure a resume file."""
    setup_intake_logger(source=resume_file.name)
    resume = _load_resume(resume_file)
    _write_json(resume.to_dict(), output)


@app.command("score")
def score_command(
    resume_file: ResumeFile,
    job_file: JobFile,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the full analysis as JSON")
    ] = False,
    output: OutputFile = None,
):
    """Score a resume file against a job description."""
    setup_targeting_logger(job_source=job_file.name)
    resume = _load_resume(resume_file)
    job_description = _read_job(job_file)

    start = time.time()
    result = score_resume(resume, job_description)
    log_analysis_result(resume_file.name, result, time.time() - start)

    if as_json or output:
        _write_json(result.to_dict(), output)
        return

    typer.echo("\n" + "=" * 80)
    typer.echo(f"Overall:  {result.overall_score}/100")
    typer.echo(f"  Keywords: {result.keyword_score}")
    typer.echo(f"  Format:   {result.format_score}")
    typer.echo(f"  Content:  {result.content_score}")
    typer.echo(f"\nMatched ({len(result.matched_keywords)}): {', '.join(result.matched_keywords)}")
    typer.echo(f"Missing ({len(result.missing_keywords)}): {', '.join(result.missing_keywords)}")
    if result.recommendations:
        typer.echo("\nRecommendations:")
        for recommendation in result.recommendations:
            typer.echo(f"  • {truncate_display(recommendation, 76)}")


@app.command("optimize")
def optimize_command(resume_file: ResumeFile, job_file: JobFile, output: OutputFile = None):
    """Write a keyword-optimized copy of a resume."""
    setup_targeting_logger(job_source=job_file.name)
    resume = _load_resume(resume_file)
    analysis, optimized = analyze_and_optimize(resume, _read_job(job_file))

    typer.echo(f"Score before optimization: {analysis.overall_score}/100")
    if optimized.additional_keywords:
        typer.echo(f"Still missing: {', '.join(optimized.additional_keywords)}")
    _write_json(optimized.resume.to_dict(), output)


if __name__ == "__main__":
    app()
