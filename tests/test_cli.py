from __future__ import annotations

import json

import httpx
import pytest

import wporg_api.cli as cli
from wporg_api import WpOrgApiClient

OFFER = {
    "response": "upgrade",
    "download": "https://downloads.wordpress.org/release/wordpress-6.4.2.zip",
    "locale": "en_US",
    "packages": {"full": "https://downloads.wordpress.org/release/wordpress-6.4.2.zip"},
    "current": "6.4.2",
    "version": "6.4.2",
    "php_version": "7.0.0",
    "mysql_version": "5.0",
    "new_bundled": "6.4",
    "partial_version": False,
}

ROUTES = {
    "/core/checksums/1.0/": {"checksums": {"index.php": "abc"}},
    "/core/version-check/1.7/": {"offers": [OFFER]},
    "/plugin-checksums/akismet/5.3.json": {"files": {"akismet.php": {"md5": "def"}}},
}


def send_request(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/secret-key/1.1/salt/":
        return httpx.Response(200, text="define('AUTH_KEY', 'abc');\n", request=request)
    if request.url.path in ROUTES:
        return httpx.Response(200, json=ROUTES[request.url.path], request=request)
    return httpx.Response(404, text="not found", request=request)


@pytest.fixture
def mocked_client(monkeypatch) -> list[object]:
    seen: list[object] = []

    def build(args) -> WpOrgApiClient:
        seen.append(cli._client_options(args))
        transport = httpx.MockTransport(send_request)
        return WpOrgApiClient(httpx_client=httpx.Client(transport=transport))

    monkeypatch.setattr(cli, "_build_client", build)
    return seen


def test_core_checksums_prints_json(mocked_client, capsys) -> None:
    assert cli._main(["core-checksums", "6.4.2"]) == 0
    assert json.loads(capsys.readouterr().out) == {"index.php": "abc"}


def test_plugin_checksums_prints_json(mocked_client, capsys) -> None:
    assert cli._main(["plugin-checksums", "akismet", "5.3"]) == 0
    assert json.loads(capsys.readouterr().out) == {"akismet.php": {"md5": "def"}}


def test_offer_prints_summary(mocked_client, capsys) -> None:
    assert cli._main(["offer"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "version": "6.4.2",
        "locale": "en_US",
        "download": OFFER["download"],
        "php_version": "7.0.0",
        "mysql_version": "5.0",
    }


def test_offer_full_prints_whole_offer(mocked_client, capsys) -> None:
    assert cli._main(["offer", "--full"]) == 0
    assert json.loads(capsys.readouterr().out) == OFFER


def test_offer_locale_mismatch_exits_with_failure(mocked_client, capsys) -> None:
    assert cli._main(["offer", "--locale", "fr_FR"]) == 1
    assert "unexpected response for offer" in capsys.readouterr().err


def test_salts_php_and_json_formats(mocked_client, capsys) -> None:
    assert cli._main(["salts"]) == 0
    assert capsys.readouterr().out == "define('AUTH_KEY', 'abc');\n"

    assert cli._main(["salts", "--format", "json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"AUTH_KEY": "abc"}


def test_http_error_exits_with_error_code(mocked_client, capsys) -> None:
    assert cli._main(["plugin-checksums", "missing", "1.0"]) == 2
    assert "HTTP code 404" in capsys.readouterr().err


def test_global_flags_map_to_client_options(mocked_client) -> None:
    assert cli._main(["--timeout", "5", "--insecure", "--proxy", "http://proxy:3128", "salts"]) == 0
    assert mocked_client == [{"timeout": 5.0, "proxy": "http://proxy:3128", "verify": False}]


def test_transport_decoding_error_exits_with_error_code(monkeypatch, capsys) -> None:
    def corrupt(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            stream=httpx.ByteStream(b"not gzip"),
            headers={"Content-Encoding": "gzip"},
            request=request,
        )

    def build(args) -> WpOrgApiClient:
        return WpOrgApiClient(httpx_client=httpx.Client(transport=httpx.MockTransport(corrupt)))

    monkeypatch.setattr(cli, "_build_client", build)

    assert cli._main(["salts"]) == 2
    assert "Couldn't fetch response" in capsys.readouterr().err
