"""
Module: converter.output

Purpose:
    PDF assembly and output for the converter.
    Builds the document in memory with ReportLab and saves it on request.

Key Classes:
    - PdfDocument: One image per page, serialized to bytes

Key Functions:
    - suggested_filename(): Default output filename
    - write_pdf(): Save PDF bytes to disk

Dependencies:
    - reportlab: PDF generation
    - PIL: Image encoding

Used By:
    - converter.controller: Pipeline orchestration
    - gui.widgets.conversion_panel: Saving the result
"""

from .renderer import PdfDocument
from .writer import suggested_filename, write_pdf

__all__ = [
    "PdfDocument",
    "suggested_filename",
    "write_pdf",
]
