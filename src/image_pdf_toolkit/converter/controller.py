"""
Module: converter.controller

Purpose:
    Orchestrate the complete conversion pipeline.
    Resolve page → (Decode → Place → Embed) per image → Serialize

Key Functions:
    - convert(): Main entry point for converting images to a PDF

Key Classes:
    - ConversionResult: Finished document and metadata
    - ConversionRun: Explicit state of one run (idle/running/complete/...)
    - ConversionState: Run states

Dependencies:
    - converter.images: Decoding
    - converter.layout: Page dimensions and placement
    - converter.output: PDF assembly

Used By:
    - gui.widgets.conversion_panel: GUI integration
    - scripts/convert_images.py: Command line
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from image_pdf_toolkit.core.models import ConversionSettings, Placement, SourceImage

from .config import COMPLETE_PROGRESS, IMAGE_PROGRESS_SHARE, OUTPUT_CONTENT_TYPE
from .errors import (
    ConversionCancelledError,
    ConversionError,
    ConversionInProgressError,
)
from .images import decode_image
from .layout import compute_placement, resolve_page_dimensions
from .output import PdfDocument, suggested_filename

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


@dataclass(frozen=True)
class ConversionResult:
    """
    Complete conversion result (immutable).

    Attributes:
        pdf_bytes: Serialized PDF
        filename: Suggested download filename
        page_count: Number of pages (one per image)
        page_size_mm: (width, height) of every page in millimetres
        placements: (image id, placement) per page, in page order
        settings: Settings the run used
        elapsed_seconds: Wall time of the run

    Example:
        >>> result = convert(images, ConversionSettings())
        >>> print(f"{result.page_count} pages, {result.size_bytes} bytes")
    """
    pdf_bytes: bytes = field(repr=False)
    filename: str
    page_count: int
    page_size_mm: Tuple[float, float]
    placements: Tuple[Tuple[str, Placement], ...]
    settings: ConversionSettings
    elapsed_seconds: float = 0.0
    content_type: str = OUTPUT_CONTENT_TYPE

    @property
    def size_bytes(self) -> int:
        return len(self.pdf_bytes)


def convert(
    images: Sequence[SourceImage],
    settings: ConversionSettings,
    *,
    progress_callback: Optional[ProgressCallback] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ConversionResult:
    """
    Convert an ordered sequence of images into a single PDF.

    Pipeline:
    1. Resolve page dimensions from the page size and orientation
    2. For each image, in order:
       decode, start a new page (after the first), compute the placement,
       embed, report progress (image share of 90%)
    3. Serialize the document and report 100%

    Any error aborts the run; no partial document is returned.

    Args:
        images: Images in page order
        settings: Settings snapshot for this run
        progress_callback: Called with a percentage in [0, 100]
        cancel_event: Checked between images; when set the run stops

    Returns:
        ConversionResult with the PDF bytes

    Raises:
        DecodeError: If an image cannot be decoded
        EmbedError: If an image cannot be placed on its page
        SerializationError: If the PDF cannot be written
        ConversionCancelledError: If ``cancel_event`` was set
        ConversionError: If there are no images

    Example:
        >>> images = [SourceImage.from_path(p) for p in paths]
        >>> result = convert(images, ConversionSettings(scaling="fill"))
        >>> write_pdf(result.pdf_bytes, Path(result.filename))
    """
    start_time = time.perf_counter()
    images = list(images)
    total = len(images)

    if total == 0:
        raise ConversionError("No images to convert")

    page_width, page_height = resolve_page_dimensions(settings.page_size, settings.orientation)
    logger.info(
        f"Starting conversion of {total} image(s): {settings.summary()} "
        f"({page_width}x{page_height}mm)"
    )

    try:
        document = PdfDocument(page_width, page_height, title="Converted images")

        for index, source in enumerate(images):
            _check_cancelled(cancel_event)

            decoded = decode_image(source, index=index)

            if index > 0:
                document.new_page()

            placement = compute_placement(
                decoded.width,
                decoded.height,
                page_width,
                page_height,
                settings.scaling,
            )
            document.embed(decoded, placement, settings.quality, index=index)

            _report(progress_callback, (index + 1) * IMAGE_PROGRESS_SHARE / total)

        _check_cancelled(cancel_event)
        pdf_bytes = document.serialize()
        _report(progress_callback, COMPLETE_PROGRESS)

    except ConversionCancelledError:
        logger.warning("Conversion cancelled")
        raise
    except ConversionError as e:
        logger.error(f"Conversion failed: {e}", exc_info=True)
        raise

    elapsed = time.perf_counter() - start_time
    result = ConversionResult(
        pdf_bytes=pdf_bytes,
        filename=suggested_filename(),
        page_count=document.page_count,
        page_size_mm=(page_width, page_height),
        placements=document.placements,
        settings=settings,
        elapsed_seconds=elapsed,
    )
    logger.info(
        f"Converted {total} image(s) to {result.page_count} page(s), "
        f"{result.size_bytes} bytes in {elapsed:.2f}s"
    )
    return result


def _check_cancelled(cancel_event: Optional[threading.Event]) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise ConversionCancelledError("Conversion was cancelled")


def _report(progress_callback: Optional[ProgressCallback], value: float) -> None:
    if progress_callback is not None:
        progress_callback(value)


class ConversionState(str, Enum):
    """State of a ConversionRun."""
    IDLE = "idle"
    RUNNING = "running"
    COMPLETE = "complete"
    FAILED = "failed"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


class ConversionRun:
    """
    Explicit state for converting one image set.

    Wraps convert() with a state machine:
    IDLE → RUNNING → COMPLETE | FAILED | CANCELLED.
    A run that is RUNNING rejects a second start(). reset() returns a
    finished run to IDLE and drops its output ("convert another").

    Progress seen through ``progress`` and the callback never decreases
    within a run.

    Thread-safety: start() may run on a worker thread while cancel() and
    the read-only properties are used from another.

    Example:
        >>> run = ConversionRun(ConversionSettings(), progress_callback=print)
        >>> result = run.start(images)
        >>> run.state
        <ConversionState.COMPLETE: 'complete'>
    """

    def __init__(
        self,
        settings: Optional[ConversionSettings] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._settings = settings or ConversionSettings()
        self._progress_callback = progress_callback
        self._cancel_event = threading.Event()
        self._state = ConversionState.IDLE
        self._progress = 0.0
        self._result: Optional[ConversionResult] = None
        self._error: Optional[Exception] = None

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> ConversionState:
        return self._state

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def result(self) -> Optional[ConversionResult]:
        return self._result

    @property
    def error(self) -> Optional[Exception]:
        return self._error

    @property
    def is_running(self) -> bool:
        return self._state is ConversionState.RUNNING

    @property
    def settings(self) -> ConversionSettings:
        return self._settings

    @settings.setter
    def settings(self, value: ConversionSettings) -> None:
        with self._lock:
            if self._state is ConversionState.RUNNING:
                raise ConversionInProgressError("Cannot change settings while converting")
            self._settings = value

    # ─────────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────────

    def start(self, images: Sequence[SourceImage]) -> ConversionResult:
        """
        Run the conversion with the current settings.

        Returns:
            ConversionResult on success

        Raises:
            ConversionInProgressError: If the run is already RUNNING
            ConversionError: Any pipeline failure (state becomes FAILED,
                or CANCELLED for ConversionCancelledError)
        """
        with self._lock:
            if self._state is ConversionState.RUNNING:
                raise ConversionInProgressError("A conversion is already running")
            self._state = ConversionState.RUNNING
            self._progress = 0.0
            self._result = None
            self._error = None
            self._cancel_event.clear()
            settings = self._settings

        try:
            result = convert(
                images,
                settings,
                progress_callback=self._on_progress,
                cancel_event=self._cancel_event,
            )
        except ConversionCancelledError as e:
            self._finish(ConversionState.CANCELLED, error=e)
            raise
        except Exception as e:
            self._finish(ConversionState.FAILED, error=e)
            raise

        self._finish(ConversionState.COMPLETE, result=result)
        return result

    def cancel(self) -> None:
        """Ask a running conversion to stop before its next image."""
        if self._state is ConversionState.RUNNING:
            logger.info("Cancellation requested")
            self._cancel_event.set()

    def reset(self) -> None:
        """
        Return to IDLE and drop any result or error.

        Raises:
            ConversionInProgressError: If the run is RUNNING
        """
        with self._lock:
            if self._state is ConversionState.RUNNING:
                raise ConversionInProgressError("Cannot reset while converting")
            self._state = ConversionState.IDLE
            self._progress = 0.0
            self._result = None
            self._error = None
            self._cancel_event.clear()

    def _finish(
        self,
        state: ConversionState,
        *,
        result: Optional[ConversionResult] = None,
        error: Optional[Exception] = None,
    ) -> None:
        with self._lock:
            self._state = state
            self._result = result
            self._error = error

    def _on_progress(self, value: float) -> None:
        with self._lock:
            if value <= self._progress:
                return
            self._progress = value
        if self._progress_callback is not None:
            self._progress_callback(value)
