"""Shared pytest fixtures for Netflix Analyzer tests."""

import pytest

from netflixanalyzer.config import CatalogConfig, Config, DisplayConfig
from netflixanalyzer.models.title import Kind, Title

HEADER = (
    "show_id,type,title,director,cast,country,date_added,"
    "release_year,rating,duration,listed_in,description\n"
)

SAMPLE_ROWS = [
    's1,Movie,Dick Johnson Is Dead,Kirsten Johnson,,United States,"September 25, 2021",2020,'
    'PG-13,90 min,Documentaries,"As her father nears the end of his life, '
    'filmmaker Kirsten Johnson stages his death."\n',
    's2,TV Show,Blood & Water,,"Ama Qamata, Khosi Ngema",South Africa,"September 24, 2021",2021,'
    'TV-MA,2 Seasons,"International TV Shows, TV Dramas",A Cape Town teen sets out to prove '
    "a swimming star is her sister.\n",
    's3,TV Show,Ganglands,Julien Leclercq,Sami Bouajila,,"September 24, 2021",2021,TV-MA,'
    '1 Season,"Crime TV Shows, TV Action","To protect his family from a drug lord,\n'
    'a skilled thief is pulled into a turf war."\n',
    '"  s4 "," Movie ","  Sankofa  ",Haile Gerima,"Kofi Ghanaba, Oyafunmike Ogunlano",'
    '"United States  ","  September 24, 2021  ", 1993 ,TV-MA,125 min,'
    '"Dramas, Independent Movies","  On a photo shoot in Ghana, an American model slips back in time. "\n',
    "s5,Movie,Too Short,Nobody\n",
    's6,Movie,Bad Year,Some Director,,India,"March 1, 2019",abc,TV-14,,Dramas,A story.\n',
    "s7,Movie,No Date,,,Unknown,,2019,TV-14,95 min,Comedies,Undated title.\n",
]

SAMPLE_CSV = HEADER + "".join(SAMPLE_ROWS)


@pytest.fixture
def sample_csv_text():
    """Raw CSV text with well-formed and malformed rows."""
    return SAMPLE_CSV


@pytest.fixture
def catalog_file(tmp_path):
    """Write the sample CSV to a temporary file."""
    path = tmp_path / "netflix_titles.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def lenient_settings(catalog_file):
    """Catalog settings that default bad years to zero."""
    return CatalogConfig(source=str(catalog_file))


@pytest.fixture
def test_config(catalog_file):
    """Full configuration pointing at the sample catalog."""
    return Config(
        catalog=CatalogConfig(source=str(catalog_file)),
        display=DisplayConfig(max_rows=0, column_width=40),
    )


@pytest.fixture
def make_title():
    """Factory for Title records with sensible defaults."""

    def _make(**overrides):
        values = dict(
            identifier="s1",
            kind=Kind.MOVIE,
            title="Example",
            director="",
            cast="",
            country="United States",
            date_added="January 1, 2020",
            release_year=2020,
            rating="TV-MA",
            duration="90 min",
            genres="Dramas",
            description="",
        )
        values.update(overrides)
        return Title(**values)

    return _make
