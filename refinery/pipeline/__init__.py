"""Pipeline package — per-URL extraction and the sequential batch runner."""

from refinery.pipeline.extractor import Extractor
from refinery.pipeline.naming import file_name_for
from refinery.pipeline.report import FailureEntry, RunReport, SuccessEntry
from refinery.pipeline.runner import run_pipeline
from refinery.pipeline.urls import load_urls

__all__ = [
    "Extractor",
    "FailureEntry",
    "RunReport",
    "SuccessEntry",
    "file_name_for",
    "load_urls",
    "run_pipeline",
]
