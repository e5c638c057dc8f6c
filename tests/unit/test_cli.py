from __future__ import annotations

import argparse
import json
from argparse import Namespace
from pathlib import Path

import pytest

from dynaform import cli
from dynaform.dom import Document
from dynaform.exceptions import PackageError
from dynaform.settings import Settings

VALID_ASSIGNMENTS = [
    ("name", "Jane Doe"),
    ("email", "jane@example.com"),
    ("password", "Str0ng!Pass"),
    ("age", "30"),
    ("gender", "male"),
    ("terms", "accepted"),
]


def test_build_parser_supports_version_flag(capsys) -> None:
    parser = cli.build_parser()

    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])
    assert exc_info.value.code == 0

    captured = capsys.readouterr()
    assert "0.1.0" in captured.out


def test_submit_parser_collects_assignments() -> None:
    args = cli.build_parser().parse_args(
        ["submit", "--set", "name=Jane", "--set", "note=a=b", "--diagnostics"],
    )

    assert args.command == "submit"
    assert args.assignments == [("name", "Jane"), ("note", "a=b")]
    assert args.diagnostics is True


@pytest.mark.parametrize("raw", ["novalue", "=value"])
def test_assignment_from_cli_rejects_malformed_values(raw: str) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        cli._assignment_from_cli(raw)


def test_build_registration_form_creates_mount_point(settings: Settings) -> None:
    document = Document()

    engine = cli.build_registration_form(document, settings=settings, title="Sign up")

    assert document.get_element_by_id(cli.MOUNT_TARGET_ID) is not None
    assert [field.identifier for field in engine.fields] == [
        "name",
        "email",
        "password",
        "age",
        "gender",
        "terms",
        "submit",
    ]
    assert engine.configuration.title_text == "Sign up"
    assert engine.rendered_root is None


def test_fill_controls_requires_rendered_form(settings: Settings) -> None:
    engine = cli.build_registration_form(Document(), settings=settings)

    with pytest.raises(PackageError):
        cli.fill_controls(engine, [("name", "Jane")])


def test_fill_controls_checks_matching_options(settings: Settings) -> None:
    engine = cli.build_registration_form(Document(), settings=settings)
    engine.render()

    cli.fill_controls(engine, VALID_ASSIGNMENTS)

    values = engine.get_values()
    assert values is not None
    assert values["gender"] == "male"
    assert values["terms"] == ["accepted"]
    assert values["age"] == "30"


def test_main_renders_form_to_file(mocker, tmp_path: Path) -> None:
    output_path = tmp_path / "out" / "form.html"
    parser = mocker.Mock()
    parser.parse_args.return_value = Namespace(command="render", output_path=output_path, title="Sign up")

    mocker.patch("dynaform.cli.build_parser", return_value=parser)
    mocker.patch("dynaform.cli.get_settings", return_value=Settings())
    mocker.patch("dynaform.cli.configure_logging")

    assert cli.main() == 0

    html = output_path.read_text(encoding="utf-8")
    assert html.startswith("<!DOCTYPE html>")
    assert 'id="form_form_container"' in html
    assert "Sign up" in html


def test_main_reports_accepted_submission(mocker, capsys) -> None:
    parser = mocker.Mock()
    parser.parse_args.return_value = Namespace(
        command="submit",
        assignments=VALID_ASSIGNMENTS,
        diagnostics=False,
    )

    mocker.patch("dynaform.cli.build_parser", return_value=parser)
    mocker.patch("dynaform.cli.get_settings", return_value=Settings())
    mocker.patch("dynaform.cli.configure_logging")

    assert cli.main() == 0

    report = json.loads(capsys.readouterr().out)
    assert report["accepted"] is True
    assert report["popup"] is None
    assert report["values"]["name"] == "Jane Doe"
    assert report["values"]["terms"] == ["accepted"]
    assert "submit" not in report["values"]


def test_main_reports_rejected_submission(mocker, capsys) -> None:
    assignments = [("name", "Jane1"), *VALID_ASSIGNMENTS[1:]]
    parser = mocker.Mock()
    parser.parse_args.return_value = Namespace(command="submit", assignments=assignments, diagnostics=False)

    mocker.patch("dynaform.cli.build_parser", return_value=parser)
    mocker.patch("dynaform.cli.get_settings", return_value=Settings())
    mocker.patch("dynaform.cli.configure_logging")

    assert cli.main() == cli.EXIT_REJECTED

    report = json.loads(capsys.readouterr().out)
    assert report["accepted"] is False
    assert report["popup"] == "The field 'Name' only accepts letters and spaces."


def test_submit_diagnostics_switch_to_console_logging(mocker, capsys) -> None:
    settings = Settings()
    parser = mocker.Mock()
    parser.parse_args.return_value = Namespace(
        command="submit",
        assignments=VALID_ASSIGNMENTS,
        diagnostics=True,
    )

    mocker.patch("dynaform.cli.build_parser", return_value=parser)
    mocker.patch("dynaform.cli.get_settings", return_value=settings)
    configure = mocker.patch("dynaform.cli.configure_logging")

    assert cli.main() == 0

    configure.assert_called_with(settings=settings, force=True, console=True)
    assert json.loads(capsys.readouterr().out)["accepted"] is True


def test_main_without_command_prints_help(mocker) -> None:
    parser = mocker.Mock()
    parser.parse_args.return_value = Namespace(command=None)

    mocker.patch("dynaform.cli.build_parser", return_value=parser)
    mocker.patch("dynaform.cli.get_settings", return_value=Settings())
    mocker.patch("dynaform.cli.configure_logging")

    assert cli.main() == 0
    parser.print_help.assert_called_once()
