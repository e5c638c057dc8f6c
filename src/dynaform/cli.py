"""CLI entry point for Dynaform."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dynaform import __version__, logger
from dynaform.dom import Document
from dynaform.engine import FormEngine
from dynaform.exceptions import PackageError
from dynaform.logging import configure_logging
from dynaform.seeds import registration_fields
from dynaform.settings import get_settings
from dynaform.typing.models import FormConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    from dynaform.settings import Settings

MOUNT_TARGET_ID = "form_container"
EXIT_REJECTED = 2


def _assignment_from_cli(value: str) -> tuple[str, str]:
    """Parse a `--set name=value` CLI argument.

    Args:
        value (str): Raw CLI value.

    Raises:
        argparse.ArgumentTypeError: If the value has no `=` separator or an empty name.

    Returns:
        tuple[str, str]: Control name and value.
    """
    name, separator, raw = value.partition("=")
    if not separator or not name:
        raise argparse.ArgumentTypeError("--set expects NAME=VALUE")  # noqa: TRY003
    return name, raw


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="dynaform")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser("render", help="Render the registration form as HTML")
    render_parser.add_argument("--output", type=Path, default=None, dest="output_path")
    render_parser.add_argument("--title", default="Registration", dest="title")

    submit_parser = subparsers.add_parser("submit", help="Fill and submit the registration form")
    submit_parser.add_argument(
        "--set",
        action="append",
        type=_assignment_from_cli,
        default=[],
        dest="assignments",
        metavar="NAME=VALUE",
    )
    submit_parser.add_argument("--diagnostics", action="store_true", dest="diagnostics")

    return parser


def build_registration_form(
    document: Document,
    *,
    settings: Settings,
    title: str = "Registration",
    diagnostics: bool = False,
    on_valid_submit: Callable[[], Any] | None = None,
) -> FormEngine:
    """Create an engine holding the registration seed fields.

    Args:
        document (Document): Target document; a mount point is created when missing.
        settings (Settings): Runtime settings.
        title (str): Form title.
        diagnostics (bool): Enable engine diagnostics.
        on_valid_submit (Callable[[], Any] | None): Optional zero-argument callback.

    Returns:
        FormEngine: Engine with registered fields, not rendered yet.
    """
    if document.get_element_by_id(MOUNT_TARGET_ID) is None:
        document.mount_point(MOUNT_TARGET_ID)

    builder = (
        FormConfig.builder()
        .mount_target(MOUNT_TARGET_ID)
        .name("register_form")
        .title(title, "register_form_title")
        .legend("This form was generated from field descriptors.", "register_form_legend")
        .diagnostics(enabled=diagnostics)
    )
    if on_valid_submit is not None:
        builder = builder.on_valid_submit(on_valid_submit)

    engine = FormEngine(builder.build(), document, settings=settings)
    for field in registration_fields():
        engine.add_field(field)
    return engine


def fill_controls(engine: FormEngine, assignments: list[tuple[str, str]]) -> None:
    """Write values into rendered controls by control name.

    Checkbox and radio inputs are checked when their value is assigned; other
    controls receive the value directly.

    Args:
        engine (FormEngine): Rendered engine.
        assignments (list[tuple[str, str]]): `(control_name, value)` pairs.

    Raises:
        PackageError: If the engine has not rendered a form.
    """
    form = engine.rendered_root
    if form is None:
        raise PackageError("Form is not rendered")

    for name, value in assignments:
        for element in form.iter_descendants():
            if element.get_attribute("name") != name or element.tag == "button":
                continue
            if element.get_attribute("type") in {"checkbox", "radio"}:
                if element.value == value:
                    element.checked = True
            else:
                element.value = value


def _run_render(args: argparse.Namespace, settings: Settings) -> int:
    document = Document()
    engine = build_registration_form(document, settings=settings, title=args.title)
    if engine.render() is None:
        return 1

    html = document.to_html()
    if args.output_path is None:
        sys.stdout.write(html + "\n")
        return 0

    args.output_path.parent.mkdir(parents=True, exist_ok=True)
    args.output_path.write_text(html, encoding="utf-8")
    logger.info("Form rendered", output_path=str(args.output_path))
    return 0


def _run_submit(args: argparse.Namespace, settings: Settings) -> int:
    if args.diagnostics:
        configure_logging(settings=settings, force=True, console=True)

    document = Document()
    engine = build_registration_form(document, settings=settings, diagnostics=args.diagnostics)
    if engine.render() is None:
        return 1

    fill_controls(engine, args.assignments)
    accepted = engine.submit()

    popups = document.get_elements_by_class_name(engine.configuration.popup_style_hook)
    report = {
        "accepted": accepted,
        "values": engine.get_values(),
        "popup": popups[0].text_content if popups else None,
    }
    sys.stdout.write(json.dumps(report, indent=2) + "\n")
    return 0 if accepted else EXIT_REJECTED


def main() -> int:
    """Run the CLI.

    Returns:
        int: Exit code (0 for success, 2 for a rejected submission, 1 for error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args()

    try:
        if args.command == "render":
            return _run_render(args, settings)
        if args.command == "submit":
            return _run_submit(args, settings)
    except PackageError:
        logger.exception("Command failed")
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
