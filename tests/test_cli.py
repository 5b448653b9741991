"""
Tests for the command-line entry point.
"""

import json

import pytest

from layout_repair.cli import build_parser, load_pages, main

from conftest import make_acme_navbar, make_footer


@pytest.fixture
def project_file(tmp_path):
    path = tmp_path / "project.json"
    document = {
        "name": "Acme",
        "pages": [{"id": "home", "components": [make_acme_navbar(), make_footer()]}],
    }
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestLoadPages:

    def test_list_document(self):
        assert load_pages([{"id": "home"}]) == [{"id": "home"}]

    def test_object_document(self):
        pages = [{"id": "home"}]
        assert load_pages({"pages": pages}) is pages

    @pytest.mark.parametrize("document", [{"pages": "x"}, {}, "pages", 3])
    def test_rejects_other_shapes(self, document):
        with pytest.raises(ValueError):
            load_pages(document)


class TestParser:

    def test_pass_flags_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["p.json", "--footer-only", "--navbar-only"])


class TestMain:

    def test_writes_output_file(self, project_file, tmp_path):
        output = tmp_path / "repaired.json"
        assert main([str(project_file), "--output", str(output)]) == 0

        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["name"] == "Acme"
        navbar, footer = document["pages"][0]["components"]
        assert len(navbar["children"]) == 3
        assert footer["props"]["backgroundColor"]["value"] == "#0f172a"

    def test_footer_only(self, project_file, tmp_path):
        output = tmp_path / "repaired.json"
        main([str(project_file), "--footer-only", "--output", str(output)])

        navbar, footer = json.loads(output.read_text(encoding="utf-8"))["pages"][0]["components"]
        assert len(navbar["children"]) == 6
        assert footer["props"]["display"] == "flex"

    def test_navbar_only(self, project_file, tmp_path):
        output = tmp_path / "repaired.json"
        main([str(project_file), "--navbar-only", "--output", str(output)])

        navbar, footer = json.loads(output.read_text(encoding="utf-8"))["pages"][0]["components"]
        assert len(navbar["children"]) == 3
        assert "display" not in footer["props"]

    def test_stdout(self, project_file, capsys):
        assert main([str(project_file)]) == 0
        assert '"nav-links-main-nav"' in capsys.readouterr().out

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert main([str(path)]) == 1
