"""
Pytest configuration and shared fixtures for AgreeDisclaimer tests.
"""
import pytest
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from agreedisclaimer import APP_ID
from agreedisclaimer.adapters import FixedUserLanguage, PrefixUrlBuilder, StaticCatalog
from agreedisclaimer.loaders import ContentLoader
from agreedisclaimer.resolvers import FileResolver
from agreedisclaimer.settings import SettingsAggregator


class RecordingSink:
    """DiagnosticsSink that keeps every entry"""

    def __init__(self):
        self.entries: List[Tuple[str, str, int]] = []

    def log(self, namespace: str, message: str, severity: int) -> None:
        self.entries.append((namespace, message, severity))


class MemoryConfigStore:
    """ConfigStore backed by a dict, counting reads"""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values: Dict[Tuple[str, str], str] = {
            (APP_ID, key): value for key, value in (values or {}).items()
        }
        self.reads = 0

    def get_value(self, namespace: str, key: str, default: Optional[str] = None):
        self.reads += 1
        return self.values.get((namespace, key), default)

    def set(self, key: str, value: str) -> None:
        self.values[(APP_ID, key)] = value


@pytest.fixture
def txt_dir(tmp_path) -> Path:
    path = tmp_path / "txt"
    path.mkdir()
    return path


@pytest.fixture
def pdf_dir(tmp_path) -> Path:
    path = tmp_path / "pdf"
    path.mkdir()
    return path


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def config_store() -> MemoryConfigStore:
    return MemoryConfigStore()


@pytest.fixture
def url_builder() -> PrefixUrlBuilder:
    return PrefixUrlBuilder("/apps")


@pytest.fixture
def resolver(url_builder) -> FileResolver:
    return FileResolver("disclaimer", StaticCatalog(), url_builder)


@pytest.fixture
def loader(sink) -> ContentLoader:
    return ContentLoader(sink)


@pytest.fixture
def user_language() -> FixedUserLanguage:
    return FixedUserLanguage("de_DE")


@pytest.fixture
def aggregator(config_store, resolver, loader, user_language, url_builder, txt_dir, pdf_dir):
    return SettingsAggregator(
        config_store=config_store,
        resolver=resolver,
        loader=loader,
        user_language=user_language,
        url_builder=url_builder,
        text_base_path=txt_dir,
        pdf_base_path=pdf_dir,
    )


@pytest.fixture
def write_doc():
    """Create disclaimer_{lang}.{ext} in a directory"""

    def _write(directory: Path, lang: str, ext: str, content: str = "Disclaimer") -> Path:
        path = directory / f"disclaimer_{lang}.{ext}"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_store():
    """Build a MemoryConfigStore from {key: value}"""
    return MemoryConfigStore
