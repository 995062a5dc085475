import httpx
import pytest

from client import ideas_client


def test_run_client_returns_ideas(monkeypatch) -> None:
    def fake_post(url: str, json: dict, timeout: float) -> httpx.Response:
        assert url == ideas_client.DEFAULT_URL
        assert json == {"topic": "cats"}
        return httpx.Response(200, json={"ideas": ["a", "b", "c"]})

    monkeypatch.setattr(ideas_client.httpx, "post", fake_post)

    assert ideas_client.run_client(ideas_client.DEFAULT_URL, "cats", 5.0) == ["a", "b", "c"]


def test_run_client_exits_on_error(monkeypatch) -> None:
    monkeypatch.setattr(
        ideas_client.httpx,
        "post",
        lambda *args, **kwargs: httpx.Response(400, json={"error": "Missing topic"}),
    )

    with pytest.raises(SystemExit) as exc:
        ideas_client.run_client(ideas_client.DEFAULT_URL, "", 5.0)

    assert exc.value.code == 1


def test_main_prints_ideas(monkeypatch, capsys) -> None:
    monkeypatch.setattr(ideas_client, "run_client", lambda url, topic, timeout: ["x", "y", "z"])

    ideas_client.main(["--topic", "cats"])

    assert capsys.readouterr().out == "x\ny\nz\n"
