"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from job_post_studio.clients.job_service_client import JobServiceClient
from job_post_studio.config import load_config
from job_post_studio.exceptions import PayloadDecodeError, UserPreconditionError
from job_post_studio.export.images import save_images
from job_post_studio.models.form import Attachment, JobPostForm
from job_post_studio.models.job import Job
from job_post_studio.pipeline.job_normalizer import normalize_job
from job_post_studio.pipeline.lifecycle import RequestLifecycle
from job_post_studio.pipeline.session import SessionStore

app = typer.Typer(
    name="job-post-studio",
    help="Create, refine and illustrate job posts with the generation service",
    no_args_is_help=True,
)
console = Console()

IMAGE_TYPES: dict[str, str] = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
}


def _read_json(path: Path) -> object:
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {path}: {e}[/red]")
        raise typer.Exit(1)


def _make_store(language: str) -> SessionStore:
    config = load_config()
    return SessionStore(JobServiceClient(config.service), language=language)


def _load_job(store: SessionStore, path: Path) -> None:
    """Seed the session with a Job saved by ``create --save``."""
    data = _read_json(path)
    if not isinstance(data, dict):
        console.print(f"[red]{path} does not contain a job record[/red]")
        raise typer.Exit(1)
    store.apply_patch(data)


def _save_job(job: Job, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(job.to_wire(), ensure_ascii=False, indent=2), encoding="utf-8")
    console.print(f"[green]Job saved: {path}[/green]")


def _exit_on_failure(lifecycle: RequestLifecycle) -> None:
    if lifecycle.error:
        console.print(f"[red]Error: {lifecycle.error}[/red]")
        raise typer.Exit(1)


def render_job(job: Job) -> None:
    console.print(Panel(
        f"[bold]{job.headline}[/bold]\n\n"
        f"{job.introduction}\n\n{job.introduction_of_job}\n\n{job.description}",
        title=job.job_title,
    ))

    for label, items in (
        ("Tasks", job.tasks),
        ("Qualifications", job.qualifications),
        ("Benefits", job.benefits),
        ("Taglines", job.taglines),
        ("Body copy", job.body_copy),
    ):
        if items:
            console.print(f"\n[bold]{label}[/bold]")
            for item in items:
                console.print(f"  - {item}")

    table = Table(show_header=False, box=None)
    table.add_row("Personal address", job.personal_address)
    table.add_row("Call to action", job.call_to_action)
    table.add_row("Website", job.website)
    table.add_row("Closing date", job.closing_date)
    table.add_row("Image keyword", job.image_keyword)
    console.print()
    console.print(table)

    contact = job.contact_details
    console.print(Panel(
        f"Script: {job.voice_script}\nTone: {job.voice_tone}\nCTA: {job.voice_cta}\n"
        f"Location: {job.voice_location}\nBenefits: {job.voice_benefits}\n\n"
        f"{contact.contact_person} | {contact.email} | {contact.phone}\n"
        f"{contact.address} | {contact.website}",
        title="Voice",
        border_style="cyan",
    ))


@app.command()
def normalize(
    raw: Path = typer.Argument(help="Raw service response (.json)"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the canonical job as JSON"),
) -> None:
    """Normalize a saved raw service response into the canonical job."""
    data = _read_json(raw)
    try:
        job = normalize_job(data)
    except PayloadDecodeError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    render_job(job)
    if output:
        _save_job(job, output)


@app.command()
def create(
    company: str = typer.Argument(help="Company name"),
    title: str = typer.Option(..., "--title", help="Job title"),
    description: Path = typer.Option(None, "--description", "-d", help="Job description text file"),
    location: str = typer.Option("", "--location", help="Job location"),
    website: str = typer.Option("", "--website", help="Company website"),
    closing_date: str = typer.Option("", "--closing-date", help="Application closing date"),
    attachment: Path = typer.Option(None, "--attachment", "-a", help="File sent with the form (PDF etc.)"),
    language: str = typer.Option("de", "--lang", help="Output language: en / de"),
    save: Path = typer.Option(None, "--save", "-s", help="Write the canonical job as JSON"),
) -> None:
    """Create a job post with the generation service."""
    jd_text = ""
    if description:
        if not description.exists():
            console.print(f"[red]File not found: {description}[/red]")
            raise typer.Exit(1)
        jd_text = description.read_text(encoding="utf-8")

    att = None
    if attachment:
        if not attachment.exists():
            console.print(f"[red]File not found: {attachment}[/red]")
            raise typer.Exit(1)
        att = Attachment(filename=attachment.name, content=attachment.read_bytes())

    form = JobPostForm(
        company_name=company,
        job_title=title,
        job_description=jd_text,
        location=location,
        website=website,
        closing_date=closing_date,
        language=language,
        attachment=att,
    )
    store = _make_store(language)
    with console.status("Creating job post..."):
        job = asyncio.run(store.create_job(form))

    _exit_on_failure(store.creation)
    render_job(job)
    if save:
        _save_job(job, save)


@app.command()
def refine(
    job_file: Path = typer.Option(..., "--job", help="Canonical job JSON (from create --save)"),
    prompt: str = typer.Option(..., "--prompt", "-p", help="What to change"),
    language: str = typer.Option("en", "--lang", help="Message language: en / de"),
    save: Path = typer.Option(None, "--save", "-s", help="Write the refined job as JSON"),
) -> None:
    """Refine an existing job post through the chat endpoint."""
    store = _make_store(language)
    _load_job(store, job_file)
    try:
        with console.status("Refining job post..."):
            job = asyncio.run(store.refine_job(prompt))
    except UserPreconditionError as e:
        console.print(f"[yellow]{e}[/yellow]")
        raise typer.Exit(1)

    _exit_on_failure(store.refinement)
    render_job(job)
    if save:
        _save_job(job, save)


@app.command()
def translate(
    job_file: Path = typer.Option(..., "--job", help="Canonical job JSON"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the translation as JSON"),
) -> None:
    """Translate a job post to English."""
    store = _make_store("en")
    _load_job(store, job_file)
    with console.status("Translating..."):
        translated = asyncio.run(store.translate_to_english())

    _exit_on_failure(store.translation)
    text = json.dumps(translated, ensure_ascii=False, indent=2)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        console.print(f"[green]Translation saved: {output}[/green]")
    else:
        console.print_json(text)


@app.command()
def images(
    job_file: Path = typer.Option(..., "--job", help="Canonical job JSON"),
    template: Path = typer.Option(..., "--template", "-t", help="Image template (.png/.jpg/.webp)"),
    out_dir: Path = typer.Option(Path("./output/images"), "--out", help="Output directory"),
    language: str = typer.Option("en", "--lang", help="Message language: en / de"),
) -> None:
    """Generate images for a job post from a template."""
    if not template.exists():
        console.print(f"[red]File not found: {template}[/red]")
        raise typer.Exit(1)

    store = _make_store(language)
    _load_job(store, job_file)
    content_type = IMAGE_TYPES.get(template.suffix.lower(), "image/png")
    try:
        with console.status("Generating images..."):
            result = asyncio.run(
                store.generate_images(template.read_bytes(), template.name, content_type)
            )
    except UserPreconditionError as e:
        console.print(f"[yellow]{e}[/yellow]")
        raise typer.Exit(1)

    _exit_on_failure(store.images)
    for path in save_images(result, out_dir):
        console.print(f"[green]Image saved: {path}[/green]")


if __name__ == "__main__":
    app()
