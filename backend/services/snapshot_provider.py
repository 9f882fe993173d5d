"""Structural snapshot providers for rendered resume documents.

Providers inspect whatever artifact currently represents the resume and
report element counts plus a pixel height. They return None when no
artifact exists yet so that structural checks are skipped rather than
reported as passing.
"""

import io
import logging
from abc import ABC, abstractmethod

import pdfplumber
from bs4 import BeautifulSoup

from models.schemas.structural_snapshot import StructuralSnapshot

logger = logging.getLogger(__name__)

# PDF user space is 72 units per inch, the renderer's CSS pixels are 96 per inch
PT_TO_PX = 96 / 72


class SnapshotProvider(ABC):
    """Base class for structural snapshot providers."""

    @abstractmethod
    def snapshot(self) -> StructuralSnapshot | None:
        """Inspect the rendered artifact, or return None if there is none."""


class HtmlSnapshotProvider(SnapshotProvider):
    """Counts <img>, <table> and <svg> elements in rendered template markup.

    Static markup has no layout, so the height must come from the caller
    (e.g. the browser's measured scrollHeight).
    """

    def __init__(self, html: str | None, rendered_height_px: int = 0) -> None:
        self.html = html
        self.rendered_height_px = rendered_height_px

    def snapshot(self) -> StructuralSnapshot | None:
        if not self.html or not self.html.strip():
            return None

        soup = BeautifulSoup(self.html, "html.parser")
        snap = StructuralSnapshot(
            image_count=len(soup.find_all("img")),
            table_count=len(soup.find_all("table")),
            vector_icon_count=len(soup.find_all("svg")),
            rendered_height_px=max(0, self.rendered_height_px),
        )
        logger.info(
            "HTML snapshot: %d images, %d tables, %d icons, %dpx",
            snap.image_count, snap.table_count,
            snap.vector_icon_count, snap.rendered_height_px,
        )
        return snap


class PdfSnapshotProvider(SnapshotProvider):
    """Inspects an exported PDF: embedded images, tables, vector curves, height.

    Raises whatever pdfplumber raises for a file it cannot open.
    """

    def __init__(self, pdf_bytes: bytes | None) -> None:
        self.pdf_bytes = pdf_bytes

    def snapshot(self) -> StructuralSnapshot | None:
        if not self.pdf_bytes:
            return None

        images = tables = curves = 0
        height_pt = 0.0
        with pdfplumber.open(io.BytesIO(self.pdf_bytes)) as pdf:
            for page in pdf.pages:
                images += len(page.images)
                tables += len(page.find_tables())
                curves += len(page.curves)
                height_pt += float(page.height)
            n_pages = len(pdf.pages)

        snap = StructuralSnapshot(
            image_count=images,
            table_count=tables,
            vector_icon_count=curves,
            rendered_height_px=round(height_pt * PT_TO_PX),
        )
        logger.info(
            "PDF snapshot: %d pages, %d images, %d tables, %d curves, %dpx",
            n_pages, images, tables, curves, snap.rendered_height_px,
        )
        return snap
