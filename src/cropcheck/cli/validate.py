"""cropcheck validate — run the photo quality pipeline on one photo."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

import orjson
import typer
from PIL import Image
from rich.console import Console

from cropcheck.core.extractor import get_extractor
from cropcheck.core.validator import PhotoValidator
from cropcheck.io.config_io import load_config
from cropcheck.models.config import DEFAULT_SCORING, ScoringConfig, ServiceConfig
from cropcheck.models.validation import PhotoValidationRequest

console = Console()


def _load_settings(config_path: Optional[str]) -> tuple[ScoringConfig, ServiceConfig]:
    if not config_path:
        return DEFAULT_SCORING, ServiceConfig()
    try:
        return load_config(config_path)
    except (OSError, ValueError) as exc:
        typer.echo(f"Error: could not load config {config_path}: {exc}", err=True)
        raise typer.Exit(1)


def _declared_size(path: Path) -> tuple[int, int] | None:
    """Read dimensions from the image header, if Pillow can parse it."""
    try:
        with Image.open(path) as img:
            return img.width, img.height
    except Exception:
        return None


def validate(
    image: Optional[str] = typer.Argument(None, help="Photo file to validate"),
    url: Optional[str] = typer.Option(None, "--url", help="Photo URL or identifier"),
    width: Optional[int] = typer.Option(None, "--width", help="Declared width in pixels"),
    height: Optional[int] = typer.Option(None, "--height", help="Declared height in pixels"),
    backend: Optional[str] = typer.Option(
        None, "--backend", help="Statistics backend: placeholder or pixel"
    ),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Config YAML"),
    lang: Optional[str] = typer.Option(None, "-l", "--lang", help="Suggestion language"),
    output: Optional[str] = typer.Option(None, "-o", "--out", help="Output JSON path"),
) -> None:
    """Validate a produce photo for quality grading.

    Exit code 0 = photo is valid, exit code 2 = photo needs to be retaken.
    """
    scoring, service = _load_settings(config_path)
    if lang:
        scoring = replace(scoring, suggestion_language=lang)

    raw: bytes | None = None
    photo_url = url or ""
    if image:
        path = Path(image)
        if not path.is_file():
            typer.echo(f"Error: {image} is not a file", err=True)
            raise typer.Exit(1)
        raw = path.read_bytes()
        photo_url = url or str(path)
        size = _declared_size(path)
        if size is not None:
            width = width or size[0]
            height = height or size[1]

    request = PhotoValidationRequest(
        photo_url=photo_url,
        width=width or service.default_width,
        height=height or service.default_height,
        image_buffer=raw,
    )

    try:
        extractor = get_extractor(
            backend or service.extractor,
            service.max_image_dimension,
            service.produce_pixel_fraction,
        )
        result = PhotoValidator(extractor, scoring).validate(request)
    except Exception as exc:
        typer.echo(f"Error: validation failed: {exc}", err=True)
        raise typer.Exit(1)

    # Display results
    console.print(f"\n[bold]Photo Validation[/bold] {request.photo_url}\n")
    console.print(f"  Grade: [bold]{result.grade.value}[/bold]")
    console.print(f"  Quality score: {result.quality_score:.2f}")
    console.print(f"  Confidence: {result.confidence:.2f}")
    for issue in result.issues:
        console.print(f"  [yellow]{issue.type}[/yellow]  {issue.message}")
        console.print(f"         {issue.suggestion}")

    console.print()
    if result.is_valid:
        console.print("[bold green]Photo: VALID[/bold green]")
    else:
        console.print("[bold red]Photo: RETAKE[/bold red]")

    if output:
        data = orjson.dumps(result.to_dict(), option=orjson.OPT_INDENT_2)
        with open(output, "wb") as f:
            f.write(data)
        console.print(f"[green]Saved to {output}[/green]")

    if not result.is_valid:
        raise typer.Exit(2)


def check_resolution(
    width: int = typer.Argument(..., help="Width in pixels"),
    height: int = typer.Argument(..., help="Height in pixels"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Config YAML"),
) -> None:
    """Check declared dimensions against the minimum resolution.

    Exit code 0 = meets the minimum, exit code 2 = too small.
    """
    scoring, _ = _load_settings(config_path)
    if PhotoValidator(config=scoring).validate_resolution(width, height):
        console.print(f"[green]{width}x{height} meets the minimum resolution[/green]")
        return
    console.print(
        f"[red]{width}x{height} is below the minimum "
        f"{scoring.min_width}x{scoring.min_height}[/red]"
    )
    raise typer.Exit(2)
