from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from domain.errors import TransportFailure
from integration.vat_page_adapter import VatRatesPageAdapter


def _session(text: str = "", status: int = 200, exc: Exception | None = None) -> MagicMock:
    session = MagicMock(spec=requests.Session)
    if exc is not None:
        session.get.side_effect = exc
        return session
    response = MagicMock(spec=requests.Response)
    response.status_code = status
    response.text = text
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    session.get.return_value = response
    return session


def test_fetch_html_returns_body() -> None:
    session = _session("<html>ok</html>")
    adapter = VatRatesPageAdapter(session=session, url="https://example.test/vat", timeout=5)
    assert adapter.fetch_html() == "<html>ok</html>"
    session.get.assert_called_once()
    assert session.get.call_args.args[0] == "https://example.test/vat"
    assert session.get.call_args.kwargs["timeout"] == 5
    assert adapter.last_status == 200


def test_http_error_is_transport_failure() -> None:
    adapter = VatRatesPageAdapter(session=_session("gone", status=503))
    with pytest.raises(TransportFailure):
        adapter.fetch_html()
    assert adapter.last_status == 503


def test_connection_error_is_transport_failure() -> None:
    adapter = VatRatesPageAdapter(session=_session(exc=requests.ConnectionError("refused")))
    with pytest.raises(TransportFailure, match="refused"):
        adapter.fetch_html()


def test_empty_body_is_transport_failure() -> None:
    adapter = VatRatesPageAdapter(session=_session("  \n"))
    with pytest.raises(TransportFailure, match="Empty"):
        adapter.fetch_html()
