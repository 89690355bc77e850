"""Business logic use cases."""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import httpx
from markdown_it import MarkdownIt

from readme_survey.adapters.corpus import FileSystemCorpus
from readme_survey.core import (
    AggregationStore,
    CorpusReader,
    FeatureClassifier,
    MissingReadmeError,
    ReadmeClient,
    ReadmeMarkers,
    ReportWriter,
    Repository,
    RepositorySource,
    build_reports,
    parse_document,
    walk,
)
from readme_survey.core.document import create_parser


@dataclass
class AnalysisResult:
    """Outcome of one pass over the corpus."""

    store: AggregationStore
    analyzed: list[Repository] = field(default_factory=list)
    misses: list[Repository] = field(default_factory=list)


class AnalysisService:
    """Classify every README in the corpus and write the feature reports."""

    def __init__(
        self,
        corpus: CorpusReader,
        report_writer: ReportWriter,
        classifier: Optional[FeatureClassifier] = None,
        parser: Optional[MarkdownIt] = None,
    ) -> None:
        self.corpus = corpus
        self.report_writer = report_writer
        self.classifier = classifier or FeatureClassifier()
        self.parser = parser or create_parser()

    def analyze_document(self, repository: Repository, text: str, store: AggregationStore) -> None:
        """Offer every node of one README to the classifiers."""
        root = parse_document(text, self.parser)
        for node in walk(root):
            self.classifier.classify(node, repository, store)

    def analyze(self) -> AnalysisResult:
        """Analyze the corpus, most starred repositories first."""
        print("\n" + "=" * 70)
        print("🔍 STAGE 1: ANALYZING READMES")
        print("=" * 70)

        repositories = sorted(
            self.corpus.read_manifest(),
            key=lambda repository: repository.stars,
            reverse=True,
        )
        result = AnalysisResult(store=AggregationStore())

        for i, repository in enumerate(repositories, 1):
            try:
                text = self.corpus.read_readme(repository)
            except MissingReadmeError as e:
                print(f"  [{i}/{len(repositories)}] ⚠️  {e}")
                result.misses.append(repository)
                continue

            self.analyze_document(repository, text, result.store)
            result.analyzed.append(repository)

        print(f"\n✓ Analyzed: {len(result.analyzed)}")
        print(f"✗ Missing READMEs: {len(result.misses)}")

        return result

    def write_reports(self, store: AggregationStore, destination: Path) -> list[Path]:
        """Build every report from the store and serialize it."""
        print("\n" + "=" * 70)
        print("📊 STAGE 2: WRITING REPORTS")
        print("=" * 70)

        reports = build_reports(store)
        paths = self.report_writer.write(reports, destination)

        for report, path in zip(reports, paths):
            print(f"  └─ {path.name}: {len(report.rows)} rows")

        return paths

    def run(self, destination: Path) -> AnalysisResult:
        result = self.analyze()
        self.write_reports(result.store, destination)
        return result


@dataclass
class DownloadStats:
    """Counters for one download run."""

    downloaded: int = 0
    missing: int = 0
    skipped: int = 0
    failed: int = 0


class DownloadService:
    """Discover repositories and download their READMEs into the corpus."""

    def __init__(
        self,
        source: RepositorySource,
        readme_client: ReadmeClient,
        corpus: FileSystemCorpus,
        workers: int = 32,
    ) -> None:
        self.source = source
        self.readme_client = readme_client
        self.corpus = corpus
        self.markers: ReadmeMarkers = corpus.markers
        self.workers = workers

    async def discover(self) -> list[Repository]:
        """Search for repositories and record them in the corpus manifest."""
        print("\n" + "=" * 70)
        print("📥 STAGE 1: DISCOVERING REPOSITORIES")
        print("=" * 70)

        repositories = await self.source.discover()
        self.corpus.write_manifest(repositories)
        print(f"✓ Manifest saved: {self.corpus.manifest_path}")

        return repositories

    async def download_all(self, repositories: list[Repository]) -> DownloadStats:
        """Download READMEs with a bounded pool of workers.

        Each repository is attempted at most once; repositories with a README
        or a not-found marker already on disk are skipped.
        """
        print("\n" + "=" * 70)
        print("📥 STAGE 2: DOWNLOADING READMES")
        print("=" * 70)

        pending, skipped = self.markers.filter_pending(repositories)
        print(f"  └─ {len(pending)} pending, {skipped} already on disk")

        queue: asyncio.Queue[Repository] = asyncio.Queue()
        for repository in pending:
            queue.put_nowait(repository)

        stats = DownloadStats(skipped=skipped)
        await asyncio.gather(
            *(self._worker(queue, stats) for _ in range(max(1, self.workers)))
        )

        corpus_stats = self.markers.get_stats()
        print(f"\n✓ Downloaded: {stats.downloaded}")
        print(f"✓ Skipped: {stats.skipped}")
        print(f"✗ No README: {stats.missing}")
        if stats.failed:
            print(f"⚠️  Failed: {stats.failed}")
        print(
            f"Corpus: {corpus_stats['fetched']} READMEs, "
            f"{corpus_stats['missing']} confirmed absent"
        )

        return stats

    async def _worker(self, queue: "asyncio.Queue[Repository]", stats: DownloadStats) -> None:
        while True:
            try:
                repository = queue.get_nowait()
            except asyncio.QueueEmpty:
                return

            print(f"Downloading {repository.full_name}")
            try:
                content = await self.readme_client.fetch_readme(repository)
                if content is None:
                    self.markers.mark_missing(repository)
                    stats.missing += 1
                else:
                    self.markers.mark_fetched(repository, content)
                    stats.downloaded += 1
            except (httpx.HTTPError, OSError) as e:
                print(f"  ⚠️  Download failed for {repository.full_name}: {e}")
                stats.failed += 1

    async def run(self) -> DownloadStats:
        repositories = await self.discover()
        return await self.download_all(repositories)
