"""Output file name derivation for templates.

A template may start with a directive line such as::

    ///%s-service.yaml

The text after ``///`` is a printf-style format with a single ``%s`` slot that
receives the resource name. The directive line is not part of the template
body. Without a directive the output name is the template's file name with the
template suffix removed once.
"""

from __future__ import annotations

from pathlib import Path

from ..core.errors import TemplateParseError

DIRECTIVE_MARKER = "///"
DEFAULT_SUFFIX = ".tmpl"


def default_filename(template_path: Path, suffix: str = DEFAULT_SUFFIX) -> str:
    """Strip the first occurrence of ``suffix`` from the template's base name."""
    if not suffix:
        return template_path.name
    return template_path.name.replace(suffix, "", 1)


def split_directive(source: str) -> tuple[str | None, str]:
    """Separate an optional directive line from the template body.

    Args:
        source: Full template file content

    Returns:
        Tuple of (directive format or None, template body)
    """
    first_line, _, rest = source.partition("\n")
    if not first_line.startswith(DIRECTIVE_MARKER):
        return None, source
    return first_line[len(DIRECTIVE_MARKER) :].rstrip("\r"), rest


def apply_directive(directive: str, name: str, template_path: Path) -> str:
    """Substitute ``name`` into a directive format."""
    if "%" not in directive:
        filename = directive
    else:
        try:
            filename = directive % (name,)
        except (TypeError, ValueError) as e:
            raise TemplateParseError(
                f"{template_path}:1: invalid file name directive {directive!r}: {e}"
            ) from e

    if not filename.strip():
        raise TemplateParseError(
            f"{template_path}:1: file name directive yields an empty name"
        )
    return filename


def output_filename(
    template_path: Path,
    directive: str | None,
    name: str,
    suffix: str = DEFAULT_SUFFIX,
) -> str:
    """Resolve the output file name for a template."""
    if directive is not None:
        return apply_directive(directive, name, template_path)

    filename = default_filename(template_path, suffix)
    if not filename:
        raise TemplateParseError(
            f"{template_path}: cannot derive an output file name; add a "
            f"'{DIRECTIVE_MARKER}' directive line"
        )
    return filename
