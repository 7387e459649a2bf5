#!/usr/bin/env python3
"""
Draft a cover letter from a resume file.

Usage:
    python scripts/draft_cover_letter.py resume.pdf "Backend Engineer" "Acme Corp"
    python scripts/draft_cover_letter.py resume.txt "Data Analyst" Initech --job job.md -t modern
    python scripts/draft_cover_letter.py resume.docx "CTO" Globex -t executive -o outs/letter.txt
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from resumatch.contexts.drafting import (
    CoverLetterRequest,
    CoverLetterTemplateRegistry,
    draft_cover_letter,
)
from resumatch.contexts.drafting.logger import _log_error, setup_drafting_logger
from resumatch.contexts.intake import (
    DocumentExtractionError,
    DocumentStructuringError,
    UnsupportedDocumentError,
    structure_resume_file,
)

app = typer.Typer(help="Draft a cover letter from a resume file.", add_completion=False)


@app.command()
def main(
    resume_file: Annotated[
        Path,
        typer.Argument(
            help="Resume file (.pdf, .docx or .txt)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    job_title: Annotated[str, typer.Argument(help="Title of the position")],
    company_name: Annotated[str, typer.Argument(help="Company the letter is addressed to")],
    job_file: Annotated[
        Optional[Path],
        typer.Option("--job", "-j", help="Job description file", exists=True, dir_okay=False),
    ] = None,
    template: Annotated[
        str, typer.Option("--template", "-t", help="professional, modern, creative or executive")
    ] = "professional",
    instructions: Annotated[
        str, typer.Option("--instructions", "-i", help="Extra paragraph to include")
    ] = "",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the letter here instead of stdout"),
    ] = None,
):
    """Render a cover letter and report its ATS score and suggestions."""
    available = CoverLetterTemplateRegistry().available_templates()
    if template not in available:
        raise typer.BadParameter(
            f"Unknown template '{template}'. Valid templates are: {', '.join(available)}",
            param_hint="--template",
        )

    setup_drafting_logger(company_name=company_name)

    try:
        resume = structure_resume_file(resume_file)
    except (UnsupportedDocumentError, DocumentExtractionError, DocumentStructuringError) as e:
        _log_error(f"{resume_file.name}: {e}")
        typer.echo(f"Error: {resume_file.name}: {e}", err=True)
        raise typer.Exit(code=1)

    request = CoverLetterRequest(
        resume=resume,
        job_title=job_title,
        company_name=company_name,
        job_description=job_file.read_text(encoding="utf-8") if job_file else "",
        template=template,
        custom_instructions=instructions,
    )
    draft = draft_cover_letter(request)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(draft.content + "\n", encoding="utf-8")
        typer.echo(f"Wrote {output}")
    else:
        typer.echo("\n" + draft.content + "\n")

    typer.echo("=" * 80)
    typer.echo(f"ATS score: {draft.ats_score}/100")
    if draft.keyword_matches:
        typer.echo(f"Keyword matches: {', '.join(draft.keyword_matches)}")
    for suggestion in draft.suggestions:
        typer.echo(f"  • {suggestion}")


if __name__ == "__main__":
    app()
