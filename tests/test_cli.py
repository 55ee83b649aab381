"""Tests for the command-line interface."""

import io
import json

import pytest

from udp_passgen import cli
from udp_passgen.core.client import PasswordClient
from udp_passgen.core.server import PasswordServer
from udp_passgen.core.validator import DEFAULT_PASSWORD_LENGTH

from .conftest import FakeTransport


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "config.json")


@pytest.fixture
def client(generator):
    server = PasswordServer(FakeTransport(), generator=generator)
    return PasswordClient(FakeTransport(reply=server.handle_request), ("127.0.0.1", 8080))


def run_session(client, text):
    stdout = io.StringIO()
    code = cli.interactive_session(client, stdin=io.StringIO(text), stdout=stdout)
    return code, stdout.getvalue()


class TestInteractiveSession:
    def test_generates_until_quit(self, client):
        code, output = run_session(client, "n 8\nq\nn 8\n")
        assert code == 0
        assert output.count("Password generated: ") == 1
        assert len(client.transport.sent) == 1

    def test_default_length(self, client):
        _, output = run_session(client, "a\nQ\n")
        line = next(l for l in output.splitlines() if l.startswith("Password generated: "))
        assert len(line.split(": ", 1)[1]) == 8

    def test_help(self, client):
        _, output = run_session(client, "h\nq\n")
        assert "Ambiguous characters" in output
        assert client.transport.sent == []

    @pytest.mark.parametrize("line", ["x 8", "n 40", "n abc", "n 8 9", ""])
    def test_invalid_input_is_reported(self, client, line):
        _, output = run_session(client, f"{line}\nq\n")
        assert "Password generated" not in output
        assert "Invalid" in output
        assert client.transport.sent == []

    def test_eof_quits(self, client):
        code, _ = run_session(client, "")
        assert code == 0


class TestMain:
    def test_no_arguments_shows_examples(self, capsys):
        assert cli.main([]) == 1
        assert "udp-passgen server" in capsys.readouterr().out

    def test_invalid_type_fails_before_sending(self, config_path):
        assert cli.main(["client", "x", "8", "--config", config_path]) == 1

    def test_invalid_count(self, config_path):
        assert cli.main(["client", "n", "8", "-n", "0", "--config", config_path]) == 1

    def test_bad_config_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{")
        assert cli.main(["client", "n", "--config", str(path)]) == 1

    def test_save_config(self, config_path):
        cli.main(["client", "x", "--port", "9999", "--timeout", "1.5",
                  "--config", config_path, "--save-config"])
        with open(config_path) as f:
            saved = json.load(f)
        assert saved["port"] == 9999
        assert saved["timeout"] == 1.5

    def test_one_shot_client(self, config_path, monkeypatch, capsys):
        def fake_request_passwords(self, selector, length, count):
            return ["p" * int(length)] * count

        monkeypatch.setattr(PasswordClient, "request_passwords", fake_request_passwords)
        assert cli.main(["client", "s", "12", "-n", "2", "--config", config_path]) == 0
        out = capsys.readouterr().out
        assert out.count("p" * 12) == 2

    def test_server_interrupted(self, config_path, monkeypatch):
        seen = {}

        def fake_serve_forever(self):
            seen["strict"] = self.strict
            seen["cryptographic"] = self.generator.random_source.cryptographic
            raise KeyboardInterrupt

        monkeypatch.setattr(PasswordServer, "serve_forever", fake_serve_forever)
        code = cli.main(["server", "--port", "0", "--no-strict", "--secure-random",
                         "--config", config_path])
        assert code == 130
        assert seen == {"strict": False, "cryptographic": True}


@pytest.mark.parametrize("stored,expected", [({}, DEFAULT_PASSWORD_LENGTH), ({"default_length": 12}, 12)])
def test_client_default_length(tmp_path, monkeypatch, stored, expected):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(stored))
    seen = {}

    def fake_request_passwords(self, selector, length, count):
        seen["default_length"] = self.default_length
        return []

    monkeypatch.setattr(PasswordClient, "request_passwords", fake_request_passwords)
    assert cli.main(["client", "n", "--config", str(path)]) == 0
    assert seen["default_length"] == expected
