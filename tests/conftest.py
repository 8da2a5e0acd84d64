from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from k8sgen.context.processor import build_context
from k8sgen.core.models import RenderContext


@pytest.fixture
def write_template(tmp_path: Path) -> Callable[[str, str], Path]:
    template_dir = tmp_path / "templates"
    template_dir.mkdir()

    def _write(filename: str, content: str) -> Path:
        path = template_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def context() -> RenderContext:
    return build_context(
        cluster="aws_eu-west-1",
        namespace="web",
        name="svc",
        image="repo/svc:1.0",
        port_specs=["80,443:8443:TCP"],
    )
