import json
import pytest
from polyrecover.samples import SAMPLE_CASE, SECOND_CASE


@pytest.fixture
def sample_case():
    """Provide the 4-point sample record (k=3, p(x) = x^2 + 3)."""
    return json.loads(json.dumps(SAMPLE_CASE))


@pytest.fixture
def second_case():
    """Provide the 10-point sample record (k=7) with two inconsistent points."""
    return json.loads(json.dumps(SECOND_CASE))


@pytest.fixture
def write_record(tmp_path):
    """Provide a function that writes a record to a JSON file and returns its path."""

    def write(record, name="case.json"):
        path = tmp_path / name
        path.write_text(json.dumps(record) if not isinstance(record, str) else record)
        return str(path)

    return write


@pytest.fixture(params=[
    ("10", "4", 4),
    ("2", "111", 7),
    ("4", "213", 39),
    ("15", "aed7015a346d635", 320923294898495900),
    ("16", "E1B5E05623D881F", 1016509518118225951),
    ("36", "zz", 1295),
],
                scope="session")
def encoded_value(request: pytest.FixtureRequest):
    """Provide session-level fixture for (base, digits, decoded value) triples."""
    return request.param
