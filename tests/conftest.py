import shutil
from pathlib import Path

import pytest

from watt2watch.catalog import Catalog, parse_catalog

HEADER = "tconst\ttitleType\tprimaryTitle\toriginalTitle\tisAdult\tstartYear\tendYear\truntimeMinutes\tgenres"


def make_line(
    show_id="tt0000001",
    title_type="movie",
    primary="Title",
    original=None,
    adult="0",
    start="2000",
    end="\\N",
    runtime="90",
    genres="Drama",
):
    return "\t".join(
        [show_id, title_type, primary, original or primary, adult, start, end, runtime, genres]
    )


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures" / "data"


@pytest.fixture
def tmp_data_dir(tmp_path, fixtures_dir):
    dst = tmp_path / "data"
    dst.mkdir(parents=True, exist_ok=True)
    shutil.copy2(fixtures_dir / "titles_sample.tsv", dst / "titles_sample.tsv")
    return dst


@pytest.fixture
def sample_catalog_path(tmp_data_dir) -> Path:
    return tmp_data_dir / "titles_sample.tsv"


@pytest.fixture
def sample_catalog(fixtures_dir) -> Catalog:
    return parse_catalog((fixtures_dir / "titles_sample.tsv").read_text(encoding="utf-8"))


@pytest.fixture
def title_line():
    return make_line


@pytest.fixture
def catalog_text():
    def _build(*lines):
        return "\n".join([HEADER, *lines]) + "\n"

    return _build
