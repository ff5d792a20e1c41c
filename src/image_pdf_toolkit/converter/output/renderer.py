"""
Module: converter.output.renderer

Purpose:
    In-memory PDF document built with ReportLab. Holds one image per page
    at a computed Placement and serializes to bytes once all pages are in.

Key Classes:
    - PdfDocument: Page accumulator for a single conversion run

Dependencies:
    - reportlab: PDF generation
    - converter.images.encoder: JPEG encoding
    - core.models: DecodedImage, Placement, Quality

Used By:
    - converter.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from typing import List, Optional, Tuple

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from image_pdf_toolkit.core.models import DecodedImage, Placement, Quality

from ..config import PLACEMENT_TOLERANCE_MM
from ..errors import EmbedError, SerializationError
from ..images.encoder import encode_jpeg

logger = logging.getLogger(__name__)


def _get_creator() -> str:
    """Creator string with the current version number."""
    try:
        from image_pdf_toolkit import __version__
        version = __version__
    except ImportError:
        version = "unknown"
    return f"Image PDF Toolkit v{version}"


class PdfDocument:
    """
    PDF under construction (single use).

    Every page has the same size. The first page exists from the start;
    ``new_page()`` closes the current page and opens the next one.

    Args:
        page_width: Page width in millimetres
        page_height: Page height in millimetres
        title: Optional document title written to the PDF metadata

    Example:
        >>> doc = PdfDocument(210, 297)
        >>> doc.embed(decoded, placement, Quality.HIGH)
        >>> data = doc.serialize()
    """

    def __init__(
        self,
        page_width: float,
        page_height: float,
        *,
        title: Optional[str] = None,
    ) -> None:
        if page_width <= 0 or page_height <= 0:
            raise ValueError(f"page dimensions must be positive: {page_width}x{page_height}")

        self.page_width = page_width
        self.page_height = page_height
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(
            self._buffer,
            pagesize=(page_width * mm, page_height * mm),
            pageCompression=1,
        )
        self._canvas.setCreator(_get_creator())
        if title:
            self._canvas.setTitle(title)

        self._page_index = 0
        self._page_has_image = False
        self._placements: List[Tuple[str, Placement]] = []
        self._serialized = False

    @property
    def page_count(self) -> int:
        """Number of pages holding an image."""
        return len(self._placements)

    @property
    def placements(self) -> Tuple[Tuple[str, Placement], ...]:
        """(image id, placement) for each page, in page order."""
        return tuple(self._placements)

    def new_page(self) -> None:
        """Close the current page and start another of the same size."""
        self._check_open()
        self._canvas.showPage()
        self._page_index += 1
        self._page_has_image = False

    def embed(
        self,
        image: DecodedImage,
        placement: Placement,
        quality: Quality,
        *,
        index: Optional[int] = None,
    ) -> None:
        """
        Draw an image on the current page.

        Args:
            image: Decoded image
            placement: Rectangle in millimetres from the page's top-left
            quality: JPEG quality level for the embedded copy
            index: Position of the image in the run (for error reporting)

        Raises:
            EmbedError: If the page already holds an image, the placement
                leaves the page, or ReportLab cannot draw the image
        """
        self._check_open()
        label = image.source.name or image.id

        if self._page_has_image:
            raise EmbedError(
                f"Page {self._page_index + 1} already holds an image",
                image_id=image.id,
                image_name=image.source.name,
                index=index,
            )
        if not placement.fits_within(self.page_width, self.page_height, PLACEMENT_TOLERANCE_MM):
            raise EmbedError(
                f"Placement for {label} leaves the "
                f"{self.page_width}x{self.page_height}mm page: {placement}",
                image_id=image.id,
                image_name=image.source.name,
                index=index,
            )

        if not placement.fits_within(self.page_width, self.page_height):
            logger.warning(
                f"Placement for {label} overhangs the page by less than "
                f"{PLACEMENT_TOLERANCE_MM}mm: {placement}"
            )

        try:
            reader = ImageReader(io.BytesIO(encode_jpeg(image.image, quality)))
            self._canvas.drawImage(
                reader,
                placement.x * mm,
                _transform_y(self.page_height, placement) * mm,
                width=placement.width * mm,
                height=placement.height * mm,
            )
        except Exception as e:
            raise EmbedError(
                f"Could not embed {label}: {e}",
                image_id=image.id,
                image_name=image.source.name,
                index=index,
            ) from e

        self._page_has_image = True
        self._placements.append((image.id, placement))
        logger.debug(
            f"Page {self._page_index + 1}: {label} at "
            f"({placement.x:.2f}, {placement.y:.2f}) "
            f"{placement.width:.2f}x{placement.height:.2f}mm"
        )

    def serialize(self) -> bytes:
        """
        Finish the document and return the PDF bytes.

        Raises:
            SerializationError: If the document is empty, already serialized,
                or ReportLab fails to write it
        """
        if self._serialized:
            raise SerializationError("Document has already been serialized")
        if not self._placements:
            raise SerializationError("Document has no pages")

        try:
            self._canvas.save()
        except Exception as e:
            raise SerializationError(f"Could not write PDF: {e}") from e
        finally:
            self._serialized = True

        data = self._buffer.getvalue()
        self._buffer.close()
        logger.debug(f"Serialized {self.page_count} page(s), {len(data)} bytes")
        return data

    def _check_open(self) -> None:
        if self._serialized:
            raise SerializationError("Document has already been serialized")


def _transform_y(page_height: float, placement: Placement) -> float:
    """
    Convert a top-down placement to ReportLab's bottom-up origin.

    Args:
        page_height: Page height in millimetres
        placement: Placement measured from the page top

    Returns:
        Y of the image's bottom edge, from the page bottom, in millimetres
    """
    return page_height - placement.y - placement.height
