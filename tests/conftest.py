import pytest

from tests.pages import make_page


@pytest.fixture
def sample_page() -> str:
    return make_page([
        ("Germany", "19"),
        ("France<sup>1</sup>", "20 <span class=\"note\">(note)</span>"),
        ("Luxembourg", "17"),
    ])
