"""CLI entry points for the README survey."""

import asyncio
from pathlib import Path

import typer

from readme_survey.adapters.corpus import FileSystemCorpus
from readme_survey.adapters.reports import CsvReportWriter
from readme_survey.adapters.sources import GitHubReadmeClient, GitHubSearchSource
from readme_survey.config import Settings, get_settings
from readme_survey.core import FeatureClassifier, ManifestError
from readme_survey.use_cases import AnalysisService, DownloadService

analyze_app = typer.Typer(add_completion=False)
download_app = typer.Typer(add_completion=False)


@analyze_app.command()
def analyze(
    corpus: Path = typer.Argument(..., help="Path to the downloaded README corpus"),
    reports: Path = typer.Argument(..., help="Directory to write CSV reports to"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Optional YAML config"),
) -> None:
    """Classify README features across the corpus and write CSV reports."""
    settings = get_settings(config)

    print("\n" + "=" * 70)
    print("📚 README SURVEY - Analyze")
    print("=" * 70)
    print(f"  • Corpus: {corpus}")
    print(f"  • Reports: {reports}")

    service = AnalysisService(
        corpus=FileSystemCorpus(corpus),
        report_writer=CsvReportWriter(),
        classifier=FeatureClassifier(settings.trusted_image_hosts),
    )

    try:
        service.run(reports)
    except ManifestError as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)

    print("\n✅ DONE")


@download_app.command()
def download(
    corpus: Path = typer.Argument(..., help="Directory to download READMEs into"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Optional YAML config"),
) -> None:
    """Search GitHub for popular repositories and download their READMEs."""
    settings = get_settings(config)

    print("\n" + "=" * 70)
    print("📚 README SURVEY - Download")
    print("=" * 70)
    if settings.github_token:
        print("  ✓ GITHUB_TOKEN found")
    else:
        print("  ⚠️  GITHUB_TOKEN not found (strict rate limit)")

    asyncio.run(async_download(corpus, settings))


async def async_download(corpus: Path, settings: Settings) -> None:
    """Async implementation of the download command."""
    github = settings.github
    source = GitHubSearchSource(
        token=settings.github_token,
        language=github.language,
        min_stars=github.min_stars,
        max_results_per_query=github.max_results_per_query,
        per_page=github.per_page,
        api_base=github.api_base,
        request_timeout=github.request_timeout,
        request_delay=github.request_delay,
    )

    async with GitHubReadmeClient(
        token=settings.github_token,
        api_base=github.api_base,
        request_timeout=github.request_timeout,
    ) as readme_client:
        service = DownloadService(
            source=source,
            readme_client=readme_client,
            corpus=FileSystemCorpus(corpus),
            workers=github.workers,
        )
        await service.run()

    print("\n✅ DONE")


if __name__ == "__main__":
    analyze_app()
