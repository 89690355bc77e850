"""Core domain layer."""

from readme_survey.core.aggregation import AggregationStore
from readme_survey.core.classifiers import FeatureClassifier
from readme_survey.core.document import parse_document, walk
from readme_survey.core.entities import (
    DocumentNode,
    Emphasis,
    FencedCode,
    HtmlBlock,
    ImageLink,
    PlainLink,
    Report,
    Repository,
    TableMarker,
)
from readme_survey.core.errors import ManifestError, MissingReadmeError, ReadmeSurveyError
from readme_survey.core.interfaces import CorpusReader, ReadmeClient, ReportWriter, RepositorySource
from readme_survey.core.readme_markers import ReadmeMarkers
from readme_survey.core.reports import build_reports

__all__ = [
    "Repository",
    "DocumentNode",
    "ImageLink",
    "PlainLink",
    "HtmlBlock",
    "FencedCode",
    "TableMarker",
    "Emphasis",
    "Report",
    "AggregationStore",
    "FeatureClassifier",
    "parse_document",
    "walk",
    "build_reports",
    "ReadmeSurveyError",
    "MissingReadmeError",
    "ManifestError",
    "RepositorySource",
    "ReadmeClient",
    "CorpusReader",
    "ReportWriter",
    "ReadmeMarkers",
]
