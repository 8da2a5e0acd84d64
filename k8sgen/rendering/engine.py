"""Template loading and rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Sequence

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError

from ..core.errors import MissingTemplatesError, TemplateParseError, TemplateRenderError
from ..core.models import GenerateConfig, RenderContext, TemplateFile
from .directive import DEFAULT_SUFFIX, output_filename, split_directive
from .functions import FUNCTIONS
from .io import ensure_dir, write_synced

logger = logging.getLogger(__name__)


def build_environment() -> Environment:
    """Create the Jinja2 environment with the template function library."""
    env = Environment(
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.globals.update(FUNCTIONS)
    env.filters.update(FUNCTIONS)
    return env


def load_template(
    template_path: Path,
    name: str,
    env: Environment | None = None,
    suffix: str = DEFAULT_SUFFIX,
) -> TemplateFile:
    """Load a template file and resolve its output file name.

    Args:
        template_path: Path to the template file
        name: Resource name substituted into a directive line
        env: Jinja2 environment, a new one is built when omitted
        suffix: Template suffix removed from the default output name

    Returns:
        Parsed template with its output file name
    """
    if not template_path.exists():
        raise FileNotFoundError(f"Template not found: {template_path}")

    try:
        source = template_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise TemplateParseError(f"{template_path}: not valid UTF-8: {e}") from e

    directive, body = split_directive(source)
    filename = output_filename(template_path, directive, name, suffix)
    if directive is not None:
        logger.debug(f"Directive in {template_path} sets output name {filename}")

    env = env or build_environment()
    identifier = str(template_path)
    try:
        code = env.compile(body, name=identifier, filename=identifier)
        template = env.template_class.from_code(env, code, env.make_globals(None))
    except TemplateSyntaxError as e:
        # Line numbers refer to the body, which starts after the directive.
        lineno = e.lineno + (1 if directive is not None else 0)
        raise TemplateParseError(f"{template_path}:{lineno}: {e.message}") from e

    return TemplateFile(
        out_filename=filename, source_path=template_path, template=template
    )


def load_templates(
    template_paths: Sequence[Path], name: str, suffix: str = DEFAULT_SUFFIX
) -> list[TemplateFile]:
    """Load every template in order, failing on the first invalid one."""
    env = build_environment()
    return [load_template(path, name, env, suffix) for path in template_paths]


def render_template(template_file: TemplateFile, variables: dict[str, Any]) -> str:
    try:
        return template_file.template.render(**variables)
    except Exception as e:
        # Jinja2 re-raises errors from filters and expressions unchanged.
        raise TemplateRenderError(f"{template_file.source_path}: {e}") from e


def render_task(
    template_file: TemplateFile,
    variables: dict[str, Any],
    out_dir: Path,
    file_mode: int,
) -> Path:
    """Render a single template into the output directory.

    Args:
        template_file: Parsed template to render
        variables: Template context data
        out_dir: Directory receiving the generated file
        file_mode: File permissions

    Returns:
        Output file path
    """
    rendered_text = render_template(template_file, variables)

    output_path = out_dir / template_file.out_filename
    logger.info(f"Generating {template_file.source_path} -> {output_path}")
    write_synced(output_path, rendered_text, mode=file_mode)

    return output_path


def render_all(config: GenerateConfig, context: RenderContext) -> list[Path]:
    """Render all configured templates, one at a time, in order.

    Args:
        config: Generation configuration
        context: Shared render context

    Returns:
        List of output file paths
    """
    logger.debug(f"Rendering {len(config.templates)} template(s)")
    ensure_dir(config.out_dir)

    variables = context.template_vars()
    outputs = [
        render_task(template_file, variables, config.out_dir, config.file_mode)
        for template_file in config.templates
    ]

    logger.info(f"Successfully generated {len(outputs)} file(s) in {config.out_dir}")
    return outputs


def output_dir(out_root: Path, context: RenderContext) -> Path:
    """Directory for a run: ``<out_root>/<cluster>/<namespace>/<name>``."""
    return out_root / context.cluster / context.namespace / context.name


def generate(
    context: RenderContext,
    template_paths: Sequence[Path],
    out_root: Path = Path("gen"),
    suffix: str = DEFAULT_SUFFIX,
    file_mode: int = 0o644,
) -> list[Path]:
    """Parse every template, then render each into the run's output directory.

    Args:
        context: Shared render context
        template_paths: Template files, rendered in this order
        out_root: Base directory for generated definitions
        suffix: Template suffix removed from default output names
        file_mode: File permissions

    Returns:
        List of output file paths
    """
    if not template_paths:
        raise MissingTemplatesError("Missing template file(s)")

    templates = load_templates(template_paths, context.name, suffix)
    config = GenerateConfig(
        templates=templates,
        out_dir=output_dir(out_root, context),
        file_mode=file_mode,
    )
    return render_all(config, context)
