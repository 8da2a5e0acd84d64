"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..context import processor
from ..core.errors import K8sgenError
from ..rendering import engine
from ..settings import Settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="k8sgen",
    help="Generate Kubernetes definitions from Jinja2 templates.",
)


def parse_file_mode(value: str) -> int:
    """Parse the octal --mode value, e.g. ``0640``."""
    try:
        mode = int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e
    if mode > 0o7777:
        raise typer.BadParameter(f"Mode out of range: {value!r}")
    return mode


@app.command()
def generate(
    templates: Annotated[
        Optional[list[Path]],
        typer.Argument(
            help="Template files, rendered in the given order.",
            metavar="TEMPLATE...",
            show_default=False,
        ),
    ] = None,
    cluster: Annotated[
        Optional[str],
        typer.Option(
            "--cluster",
            help="Cluster where the definition will be deployed (format: PROVIDER_ZONE). Required.",
            metavar="PROVIDER_ZONE",
        ),
    ] = None,
    namespace: Annotated[
        Optional[str],
        typer.Option(
            "--namespace",
            help="Namespace where the definition will be deployed. Required.",
            metavar="NAMESPACE",
        ),
    ] = None,
    name: Annotated[
        Optional[str],
        typer.Option(
            "--name",
            help="Name of the resource that will be deployed. Required.",
            metavar="NAME",
        ),
    ] = None,
    image: Annotated[
        str,
        typer.Option(
            "--img",
            help="Docker image to deploy.",
            metavar="IMAGE",
        ),
    ] = "",
    port_specs: Annotated[
        list[str],
        typer.Option(
            "--ports",
            help="Ports used by service definitions (format: PORT[:TARGET_PORT[:PROTOCOL]], comma-separated). Repeatable.",
            metavar="SPEC",
        ),
    ] = [],
    out_root: Annotated[
        str,
        typer.Option(
            "--out-root",
            help="Base directory for generated definitions (default: gen).",
            metavar="DIR",
        ),
    ] = "",
    suffix: Annotated[
        Optional[str],
        typer.Option(
            "--suffix",
            help="Template suffix removed from output file names (default: .tmpl).",
            metavar="SUFFIX",
        ),
    ] = None,
    file_mode: Annotated[
        Optional[str],
        typer.Option(
            "--mode",
            help="File permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render templates into gen/<cluster>/<namespace>/<name>/."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    logger.debug("Starting k8sgen")

    settings = Settings()
    mode = parse_file_mode(file_mode if file_mode is not None else settings.file_mode)
    root = Path(out_root) if out_root else settings.out_root
    template_suffix = suffix if suffix is not None else settings.template_suffix

    try:
        context = processor.build_context(
            cluster=cluster,
            namespace=namespace,
            name=name,
            image=image,
            port_specs=port_specs,
        )
        outputs = engine.generate(
            context,
            templates or [],
            out_root=root,
            suffix=template_suffix,
            file_mode=mode,
        )
    except (K8sgenError, OSError) as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    logger.debug(f"Completed: {len(outputs)} file(s) generated")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
