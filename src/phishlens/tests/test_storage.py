# Test in-memory storage
import dataclasses
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pytest

from ..catalog import KNOWN_WEBSITES
from ..errors import DuplicateDomainError
from ..models import AnalysisFactor, KeyDifference, NewAnalysis, NewWebsite
from ..storage import MemStorage, initialize_websites


def new_analysis(score=80, website_id=1):
    return NewAnalysis(
        uploaded_image_url="memory://uploaded-image",
        identified_website_id=website_id,
        confidence_score=score,
        is_phishing=score < 70,
        timestamp=datetime.now(timezone.utc),
        analysis_factors=(AnalysisFactor("Layout analysis", "Matches reference", True),),
        key_differences=(KeyDifference("Missing security footer elements"),),
    )


class TestWebsiteOperations:
    """Test website CRUD operations."""

    def test_ids_start_at_one(self):
        storage = MemStorage()

        first = storage.create_website(NewWebsite("A", "a.com", "logo", "ref"))
        second = storage.create_website(NewWebsite("B", "b.com", "logo", "ref"))

        assert (first.id, second.id) == (1, 2)
        assert storage.get_website(2) == second

    def test_get_missing_website(self):
        assert MemStorage().get_website(42) is None

    def test_get_by_domain(self, storage):
        website = storage.get_website_by_domain("apple.com")

        assert website.name == "Apple"
        assert storage.get_website_by_domain("example.com") is None

    def test_duplicate_domain_rejected(self, storage):
        """Test domain uniqueness leaves the store unchanged."""
        before = storage.get_all_websites()

        with pytest.raises(DuplicateDomainError) as exc_info:
            storage.create_website(NewWebsite("Fake", "google.com", "logo", "ref"))

        assert exc_info.value.domain == "google.com"
        assert storage.get_all_websites() == before
        # The failed insert does not consume an id
        created = storage.create_website(NewWebsite("New", "new.com", "logo", "ref"))
        assert created.id == len(before) + 1

    def test_records_are_immutable(self, storage):
        with pytest.raises(dataclasses.FrozenInstanceError):
            storage.get_website(1).domain = "evil.com"


class TestInitializeWebsites:
    """Test seeding of the known websites."""

    def test_seeds_known_websites_in_order(self):
        storage = MemStorage()

        assert initialize_websites(storage) == 5

        websites = storage.get_all_websites()
        assert [w.name for w in websites] == [
            "Facebook",
            "Google",
            "Amazon",
            "Microsoft",
            "Apple",
        ]
        assert [w.id for w in websites] == [1, 2, 3, 4, 5]
        assert [w.domain for w in websites] == [w.domain for w in KNOWN_WEBSITES]

    def test_idempotent(self, storage):
        assert initialize_websites(storage) == 0
        assert len(storage.get_all_websites()) == 5


class TestAnalysisOperations:
    """Test analysis record operations."""

    def test_create_and_get(self):
        storage = MemStorage()

        analysis = storage.create_analysis(new_analysis())

        assert analysis.id == 1
        assert analysis.confidence_score == 80
        assert analysis.is_phishing is False
        assert analysis.key_differences[0].description == "Missing security footer elements"
        assert storage.get_analysis(1) == analysis
        assert storage.get_analysis(2) is None

    def test_list_in_creation_order(self):
        storage = MemStorage()
        for score in (10, 90, 50):
            storage.create_analysis(new_analysis(score))

        analyses = storage.get_all_analyses()

        assert [a.id for a in analyses] == [1, 2, 3]
        assert [a.confidence_score for a in analyses] == [10, 90, 50]

    def test_analysis_without_website(self):
        storage = MemStorage()

        analysis = storage.create_analysis(new_analysis(website_id=None))

        assert analysis.identified_website_id is None

    def test_concurrent_creates_keep_ids_contiguous(self):
        """Test parallel inserts get unique ids 1..n."""
        storage = MemStorage()

        with ThreadPoolExecutor(max_workers=8) as executor:
            created = list(
                executor.map(lambda _: storage.create_analysis(new_analysis()), range(200))
            )

        assert sorted(a.id for a in created) == list(range(1, 201))
        assert [a.id for a in storage.get_all_analyses()] == list(range(1, 201))
