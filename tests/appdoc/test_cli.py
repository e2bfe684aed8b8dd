import json

import pdfkit
import pytest

from click.testing import CliRunner

from appdoc.cli.main import cli


RECORDS = [
    {
        "id": "APP-2001",
        "reference_number": "APP-2001",
        "state": "Closed",
        "person": {"first_name": "Jane", "surname": "Doe"},
        "date": "2023-11-20",
        "products": [{"funds": [{"amount": 1000, "fees": 50}]}],
    },
    {
        "id": "APP-2002",
        "reference_number": "APP-2002",
        "state": "Withdrawn",
        "person": {"first_name": "John", "surname": "Doe"},
        "date": "2023-11-21",
    },
]


@pytest.fixture
def store_file(tmp_path):
    path = tmp_path / "applications.json"
    path.write_text(json.dumps(RECORDS), encoding="utf-8")
    return str(path)


def test_generate_html(tmp_path, store_file):
    output = tmp_path / "out.html"

    result = CliRunner().invoke(cli, ["generate", "APP-2001", "--store", store_file, "--html", "-o", str(output)])

    assert result.exit_code == 0, result.output
    html = output.read_text(encoding="utf-8")
    assert "Jane Doe" in html
    assert "has been closed" in html


def test_generate_pdf(tmp_path, store_file, monkeypatch):
    monkeypatch.setattr(pdfkit, "from_string", lambda *args, **kwargs: b"%PDF-1.4 fake")
    monkeypatch.setattr(pdfkit, "configuration", lambda **kwargs: kwargs)
    runner = CliRunner()

    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(cli, ["generate", "APP-2001", "--store", store_file])

        assert result.exit_code == 0, result.output
        with open("APP-2001.pdf", "rb") as f:
            assert f.read() == b"%PDF-1.4 fake"


def test_generate_unknown_application(store_file):
    result = CliRunner().invoke(cli, ["generate", "APP-9999", "--store", store_file, "--html"])

    assert result.exit_code == 1
    assert "No application found" in result.output


def test_generate_unsupported_state(store_file):
    result = CliRunner().invoke(cli, ["generate", "APP-2002", "--store", store_file, "--html"])

    assert result.exit_code == 1
    assert "Withdrawn" in result.output
    assert "A00.422" in result.output


def test_states():
    result = CliRunner().invoke(cli, ["states"])

    assert result.exit_code == 0
    assert "InReview     InReviewApplication" in result.output
