import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import asdict
from typing import Dict, List, Optional

from .catalog import KNOWN_WEBSITES
from .errors import DuplicateDomainError
from .models import Analysis, NewAnalysis, NewWebsite, Website

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Repository for website reference data and analysis results."""

    @abstractmethod
    def get_website(self, website_id: int) -> Optional[Website]:
        pass

    @abstractmethod
    def get_website_by_domain(self, domain: str) -> Optional[Website]:
        pass

    @abstractmethod
    def get_all_websites(self) -> List[Website]:
        pass

    @abstractmethod
    def create_website(self, website: NewWebsite) -> Website:
        pass

    @abstractmethod
    def create_analysis(self, analysis: NewAnalysis) -> Analysis:
        pass

    @abstractmethod
    def get_analysis(self, analysis_id: int) -> Optional[Analysis]:
        pass

    @abstractmethod
    def get_all_analyses(self) -> List[Analysis]:
        pass


class MemStorage(Storage):
    """
    Process-lifetime storage keyed by auto-incrementing ids starting at 1.

    Records are immutable once created; nothing is ever updated or deleted.
    """

    def __init__(self):
        self._websites: Dict[int, Website] = {}
        self._analyses: Dict[int, Analysis] = {}
        self._website_current_id = 1
        self._analysis_current_id = 1
        self._lock = threading.Lock()

    # Website operations
    def get_website(self, website_id: int) -> Optional[Website]:
        return self._websites.get(website_id)

    def get_website_by_domain(self, domain: str) -> Optional[Website]:
        with self._lock:
            return self._find_domain(domain)

    def get_all_websites(self) -> List[Website]:
        with self._lock:
            return list(self._websites.values())

    def create_website(self, website: NewWebsite) -> Website:
        with self._lock:
            if self._find_domain(website.domain) is not None:
                raise DuplicateDomainError(website.domain)

            website_id = self._website_current_id
            self._website_current_id += 1
            created = Website(id=website_id, **asdict(website))
            self._websites[website_id] = created
            return created

    # Analysis operations
    def create_analysis(self, analysis: NewAnalysis) -> Analysis:
        with self._lock:
            analysis_id = self._analysis_current_id
            self._analysis_current_id += 1
            created = Analysis(
                id=analysis_id,
                uploaded_image_url=analysis.uploaded_image_url,
                identified_website_id=analysis.identified_website_id,
                confidence_score=analysis.confidence_score,
                is_phishing=analysis.is_phishing,
                timestamp=analysis.timestamp,
                analysis_factors=tuple(analysis.analysis_factors),
                key_differences=tuple(analysis.key_differences),
            )
            self._analyses[analysis_id] = created
            return created

    def get_analysis(self, analysis_id: int) -> Optional[Analysis]:
        return self._analyses.get(analysis_id)

    def get_all_analyses(self) -> List[Analysis]:
        with self._lock:
            return list(self._analyses.values())

    def _find_domain(self, domain: str) -> Optional[Website]:
        return next((w for w in self._websites.values() if w.domain == domain), None)


def initialize_websites(storage: Storage) -> int:
    """Seed the known websites into an empty store. Returns how many were added."""
    if storage.get_all_websites():
        return 0

    for website in KNOWN_WEBSITES:
        storage.create_website(website)

    logger.info(f"Initialized website reference database with {len(KNOWN_WEBSITES)} websites")
    return len(KNOWN_WEBSITES)


storage = MemStorage()


def get_storage() -> Storage:
    """Dependency to get the storage."""
    return storage
