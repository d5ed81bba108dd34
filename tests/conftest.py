import pytest

from volcano_map.geo.projection import Viewport
from volcano_map.geo.ranges import compute_ranges
from volcano_map.ingest.dataset import Dataset
from volcano_map.render.encoding import EncodingContext

FIELDS = (
    "Volcano Name",
    "Latitude",
    "Longitude",
    "Elevation (m)",
    "TypeCategory",
    "Last Known Eruption",
)


def make_dataset(rows):
    return Dataset.from_rows(FIELDS, rows)


@pytest.fixture
def dataset():
    return make_dataset([
        ("Etna", "37.748", "14.999", "3357", "Stratovolcano", "D1"),
        ("Kilauea", "19.421", "-155.287", "1222", "Shield", "D1"),
        ("Krakatau", "-6.102", "105.423", "155", "Caldera", "D3"),
        ("Hunga Tonga", "-20.536", "-175.382", "-150", "Submarine", "X"),
        ("Nowhere", "", "12.0", "800", "Stratovolcano", "D2"),
        ("Fujisan", "35.361", "138.728", "3776", "Stratovolcano", "D4"),
    ])


@pytest.fixture
def ctx(dataset):
    return EncodingContext.from_ranges(compute_ranges(dataset))


@pytest.fixture
def viewport():
    return Viewport(1200.0, 800.0)
